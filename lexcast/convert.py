"""Conversion of values between types by way of their text form."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence

from .input import parse_value
from .output import format_char_array, format_real, format_value
from .types import DOUBLE, BadLexicalCast, combined_precision


def _char_of(item) -> str:
    return chr(item) if isinstance(item, int) else item


@dataclass(frozen=True)
class BufferView:
    """A read-only window ``[begin, end)`` onto a sequence of characters."""

    chars: Sequence
    begin: int
    end: int

    def __str__(self) -> str:
        window = self.chars[self.begin:self.end]
        if isinstance(window, (bytes, bytearray)):
            return window.decode("latin-1")
        if isinstance(window, str):
            return window
        return "".join(_char_of(item) for item in window)


def make_buffer_view(chars, begin, end) -> BufferView:
    """Make a view onto ``chars[begin:end]``; bytes are read as narrow chars."""
    if not 0 <= begin <= end <= len(chars):
        raise ValueError(
            f"invalid range [{begin}, {end}) for a buffer of {len(chars)} characters"
        )
    return BufferView(chars, begin, end)


def _is_char_sequence(value) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) > 0
        and all(isinstance(item, str) and len(item) == 1 for item in value)
    )


def _source_text(value) -> str:
    if isinstance(value, BufferView):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)) or _is_char_sequence(value):
        return format_char_array(value)
    return format_value(value)


def _is_copy(target, value) -> bool:
    if target is str and isinstance(value, str):
        return True
    return target in (bytes, bytearray) and isinstance(value, (bytes, bytearray))


def lexical_cast(target, value) -> Any:
    """Convert ``value`` to ``target`` through its text form.

    Raises BadLexicalCast when the text cannot be read as ``target``.
    """
    if _is_copy(target, value):
        return target(value)
    text = _source_text(value)
    if target is str:
        return text
    try:
        return parse_value(text, target)
    except BadLexicalCast:
        raise BadLexicalCast(type(value), target) from None


def try_lexical_convert(target, value) -> tuple[bool, Any]:
    """Like :func:`lexical_cast`, but report failure as ``(False, None)``."""
    try:
        return True, lexical_cast(target, value)
    except BadLexicalCast:
        return False, None


def lexical_cast_chars(target, chars, count) -> Any:
    """Convert the first ``count`` characters of ``chars`` to ``target``."""
    return lexical_cast(target, make_buffer_view(chars, 0, count))


def _legacy_text(value, target) -> str:
    if isinstance(value, float):
        if math.isfinite(value):
            return "%.*g" % (combined_precision(DOUBLE, target), value)
        return format_real(value)
    return _source_text(value)


def lexical_cast_legacy(target, value) -> Any:
    """Convert through a single text stream, with no shortcut for copies."""
    text = _legacy_text(value, target)
    if target is str:
        return text
    try:
        return parse_value(text, target)
    except BadLexicalCast:
        raise BadLexicalCast(type(value), target) from None
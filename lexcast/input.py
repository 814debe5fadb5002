"""Interpretation of text as typed values."""

from __future__ import annotations

import math
import re
import struct

from .types import (
    CAPITAL_E,
    DOUBLE,
    LOWERCASE_E,
    MINUS,
    PLUS,
    ZERO,
    BadLexicalCast,
    CharArray,
    CharType,
    FloatType,
    IntType,
)

_DIGITS = re.compile(r"[0-9]+")
_DECIMAL_REAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _as_text(text) -> str:
    if isinstance(text, (bytes, bytearray)):
        return text.decode("latin-1")
    if not isinstance(text, str):
        raise TypeError(f"expected text, got {type(text).__name__}")
    return text


def _split_sign(text: str) -> tuple[bool, str]:
    negative = text.startswith(MINUS)
    if negative or text.startswith(PLUS):
        text = text[1:]
    return negative, text


def _magnitude(digits: str, target) -> int:
    if not _DIGITS.fullmatch(digits):
        raise BadLexicalCast(str, target)
    return int(digits)


def parse_unsigned(text, itype: IntType) -> int:
    """Read an unsigned integer; a leading minus wraps the value around."""
    text = _as_text(text)
    if itype.signed:
        raise TypeError(f"{itype.name} is not an unsigned type")
    if not text:
        raise BadLexicalCast(str, itype)
    negative, digits = _split_sign(text)
    value = _magnitude(digits, itype)
    if value > itype.max:
        raise BadLexicalCast(str, itype)
    return itype.wrap(-value) if negative else value


def parse_signed(text, itype: IntType) -> int:
    """Read a signed integer, rejecting values outside ``itype``'s range."""
    text = _as_text(text)
    if not itype.signed:
        raise TypeError(f"{itype.name} is not a signed type")
    if not text:
        raise BadLexicalCast(str, itype)
    negative, digits = _split_sign(text)
    value = _magnitude(digits, itype)
    limit = (1 << itype.digits) if negative else itype.max
    if value > limit:
        raise BadLexicalCast(str, itype)
    return -value if negative else value


def parse_bool(text) -> bool:
    """Read ``0`` or ``1``, allowing a sign and leading zeros."""
    text = _as_text(text)
    if not text:
        raise BadLexicalCast(str, bool)
    last = text[-1]
    result = last == "1"
    if not result and last != ZERO:
        raise BadLexicalCast(str, bool)
    body = text[:-1]
    if body.startswith(PLUS) or (body.startswith(MINUS) and not result):
        body = body[1:]
    if any(ch != ZERO for ch in body):
        raise BadLexicalCast(str, bool)
    return result


def _parse_inf_nan(text: str) -> float | None:
    negative, body = _split_sign(text)
    if len(body) < 3:
        return None
    lowered = body.lower()
    if lowered[:3] == "nan":
        rest = body[3:]
        if rest and (len(rest) < 2 or rest[0] != "(" or rest[-1] != ")"):
            return None
        return math.copysign(math.nan, -1.0 if negative else 1.0)
    if lowered in ("inf", "infinity"):
        return -math.inf if negative else math.inf
    return None


def _narrow(value: float, ftype: FloatType) -> float:
    try:
        packed = struct.pack(ftype.narrow_format, value)
    except OverflowError:
        raise BadLexicalCast(str, ftype) from None
    return struct.unpack(ftype.narrow_format, packed)[0]


def parse_float(text, ftype: FloatType = DOUBLE) -> float:
    """Read a decimal floating-point value, ``inf``/``infinity`` or ``nan``."""
    text = _as_text(text)
    if not text:
        raise BadLexicalCast(str, ftype)
    special = _parse_inf_nan(text)
    if special is not None:
        return special
    if text[-1] in (LOWERCASE_E, CAPITAL_E, MINUS, PLUS):
        raise BadLexicalCast(str, ftype)
    if not _DECIMAL_REAL.fullmatch(text):
        raise BadLexicalCast(str, ftype)
    value = float(text)
    if math.isinf(value):
        raise BadLexicalCast(str, ftype)
    value = _narrow(value, ftype)
    if math.isinf(value):
        raise BadLexicalCast(str, ftype)
    return value


def parse_char(text, ctype: CharType) -> str:
    """Read exactly one character that fits in ``ctype``."""
    text = _as_text(text)
    if len(text) != 1 or ord(text) >= (1 << ctype.bits):
        raise BadLexicalCast(str, ctype)
    return text


def parse_char_array(text, array_type: CharArray) -> str:
    """Read text that fits in ``array_type`` together with its NUL."""
    text = _as_text(text)
    if len(text) > array_type.capacity:
        raise BadLexicalCast(str, array_type)
    limit = 1 << array_type.element.bits
    if any(ord(ch) >= limit for ch in text):
        raise BadLexicalCast(str, array_type)
    return text


def _parse_python_int(text: str) -> int:
    if not text:
        raise BadLexicalCast(str, int)
    negative, digits = _split_sign(text)
    value = _magnitude(digits, int)
    return -value if negative else value


def parse_value(text, target):
    """Interpret ``text`` as a value of type ``target``."""
    text = _as_text(text)
    if target is bool:
        return parse_bool(text)
    if isinstance(target, IntType):
        if target.signed:
            return parse_signed(text, target)
        return parse_unsigned(text, target)
    if isinstance(target, FloatType):
        return parse_float(text, target)
    if target is float:
        return parse_float(text, DOUBLE)
    if target is int:
        return _parse_python_int(text)
    if isinstance(target, CharType):
        return parse_char(text, target)
    if isinstance(target, CharArray):
        return parse_char_array(text, target)
    if target is str:
        return text
    if target in (bytes, bytearray):
        try:
            return target(text.encode("latin-1"))
        except UnicodeEncodeError:
            raise BadLexicalCast(str, target) from None
    if callable(target):
        try:
            return target(text)
        except (ValueError, TypeError):
            raise BadLexicalCast(str, target) from None
    raise BadLexicalCast(str, target)
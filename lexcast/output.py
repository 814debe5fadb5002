"""Rendering of typed values as text."""

from __future__ import annotations

import math
import struct

from .types import (
    DOUBLE,
    LONG_LONG,
    BadLexicalCast,
    CharArray,
    CharType,
    FloatType,
    IntType,
    lcast_precision,
)


def format_unsigned(value, itype: IntType) -> str:
    """Render ``value`` as an unsigned integer of type ``itype``."""
    if itype.signed:
        raise TypeError(f"{itype.name} is not an unsigned type")
    return str(itype.wrap(value))


def format_signed(value, itype: IntType) -> str:
    """Render ``value`` as a signed integer of type ``itype``."""
    if not itype.signed:
        raise TypeError(f"{itype.name} is not a signed type")
    return str(itype.wrap(value))


def format_bool(value) -> str:
    """Render a boolean as ``1`` or ``0``."""
    return "1" if value else "0"


def _narrow(value: float, ftype: FloatType) -> float:
    try:
        return struct.unpack(ftype.narrow_format, struct.pack(ftype.narrow_format, value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def format_real(value, ftype: FloatType = DOUBLE) -> str:
    """Render a floating-point value with enough digits to read it back."""
    value = _narrow(float(value), ftype)
    negative = math.copysign(1.0, value) < 0
    if math.isnan(value):
        return "-nan" if negative else "nan"
    if math.isinf(value):
        return "-inf" if negative else "inf"
    return "%.*g" % (lcast_precision(ftype), value)


def _as_char(item) -> str:
    return chr(item) if isinstance(item, int) else item


def format_char_array(chars, size=None) -> str:
    """Render at most ``size`` characters, stopping at the first NUL."""
    if isinstance(chars, (bytes, bytearray)):
        chars = chars.decode("latin-1")
    limit = len(chars) if size is None else min(size, len(chars))
    text = "".join(_as_char(item) for item in list(chars)[:limit])
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _format_char(value, ctype: CharType) -> str:
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("latin-1")
    if isinstance(value, str):
        if len(value) != 1:
            raise BadLexicalCast(ctype, str)
        return value
    code = int(value) % (1 << ctype.bits)
    try:
        return chr(code)
    except (ValueError, OverflowError):
        raise BadLexicalCast(ctype, str) from None


def _infer(value):
    if isinstance(value, bool):
        return bool
    if isinstance(value, int):
        return LONG_LONG if LONG_LONG.contains(value) else int
    if isinstance(value, float):
        return DOUBLE
    if isinstance(value, str):
        return str
    if isinstance(value, (bytes, bytearray)):
        return bytes
    return None


def format_value(value, source_type=None) -> str:
    """Render ``value`` as text, treating it as a value of ``source_type``."""
    if source_type is None:
        source_type = _infer(value)
    if source_type is bool:
        return format_bool(value)
    if isinstance(source_type, IntType):
        if source_type.signed:
            return format_signed(value, source_type)
        return format_unsigned(value, source_type)
    if isinstance(source_type, FloatType):
        return format_real(value, source_type)
    if source_type is float:
        return format_real(value, DOUBLE)
    if source_type is int:
        return str(int(value))
    if isinstance(source_type, CharType):
        return _format_char(value, source_type)
    if isinstance(source_type, CharArray):
        return format_char_array(value, source_type.size)
    if source_type is bytes and isinstance(value, (bytes, bytearray)):
        return value.decode("latin-1")
    if source_type is str and isinstance(value, str):
        return value
    return str(value)
"""Type descriptors, character constants and precision rules for conversions."""

from __future__ import annotations

import sys
from dataclasses import dataclass

ZERO = "0"
MINUS = "-"
PLUS = "+"
LOWERCASE_E = "e"
CAPITAL_E = "E"
DECIMAL_SEPARATOR = "."

DEFAULT_PRECISION = 6


def _type_name(tp) -> str:
    name = getattr(tp, "name", None)
    if isinstance(name, str):
        return name
    return getattr(tp, "__name__", repr(tp))


class BadLexicalCast(ValueError):
    """Raised when a value cannot be interpreted as the requested type."""

    def __init__(self, source_type=None, target_type=None, message=None):
        self.source_type = source_type
        self.target_type = target_type
        if message is None:
            message = (
                "bad lexical cast: source type value could not be "
                "interpreted as target"
            )
            if source_type is not None or target_type is not None:
                message += (
                    f" ({_type_name(source_type)} -> {_type_name(target_type)})"
                )
        super().__init__(message)


@dataclass(frozen=True)
class IntType:
    """A fixed-width integer type."""

    name: str
    bits: int
    signed: bool

    @property
    def digits(self) -> int:
        """Number of value bits, excluding the sign bit."""
        return self.bits - 1 if self.signed else self.bits

    @property
    def digits10(self) -> int:
        """Number of decimal digits representable without change."""
        return self.digits * 30103 // 100000

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << self.digits) - 1

    def wrap(self, value: int) -> int:
        """Reduce ``value`` modulo 2**bits into this type's range."""
        result = int(value) & ((1 << self.bits) - 1)
        if self.signed and result > self.max:
            result -= 1 << self.bits
        return result

    def contains(self, value: int) -> bool:
        """Tell whether ``value`` lies within this type's range."""
        return self.min <= value <= self.max


@dataclass(frozen=True)
class FloatType:
    """A binary floating-point type; values are held as Python floats."""

    name: str
    digits: int
    digits10: int
    max: float
    min: float
    epsilon: float
    narrow_format: str


@dataclass(frozen=True)
class CharType:
    """A character type of a given width in bytes."""

    name: str
    size: int
    signed: bool

    @property
    def bits(self) -> int:
        return self.size * 8

    @property
    def min_code(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_code(self) -> int:
        return (1 << (self.bits - 1 if self.signed else self.bits)) - 1


@dataclass(frozen=True)
class CharArray:
    """A fixed-size array of characters, terminated by NUL when shorter."""

    element: CharType
    size: int

    @property
    def capacity(self) -> int:
        """Longest text that fits, leaving room for the terminating NUL."""
        return max(self.size - 1, 0)


SHORT = IntType("short", 16, True)
USHORT = IntType("unsigned short", 16, False)
INT = IntType("int", 32, True)
UINT = IntType("unsigned int", 32, False)
LONG = IntType("long", 64, True)
ULONG = IntType("unsigned long", 64, False)
LONG_LONG = IntType("long long", 64, True)
ULONG_LONG = IntType("unsigned long long", 64, False)
INTMAX = IntType("intmax_t", 64, True)
UINTMAX = IntType("uintmax_t", 64, False)
INT128 = IntType("int128", 128, True)
UINT128 = IntType("uint128", 128, False)

FLOAT = FloatType(
    "float",
    24,
    6,
    3.4028234663852886e38,
    1.1754943508222875e-38,
    1.1920928955078125e-07,
    "f",
)
DOUBLE = FloatType(
    "double",
    53,
    15,
    sys.float_info.max,
    sys.float_info.min,
    sys.float_info.epsilon,
    "d",
)
LONG_DOUBLE = FloatType(
    "long double",
    64,
    18,
    sys.float_info.max,
    sys.float_info.min,
    sys.float_info.epsilon,
    "d",
)

CHAR = CharType("char", 1, True)
SIGNED_CHAR = CharType("signed char", 1, True)
UNSIGNED_CHAR = CharType("unsigned char", 1, False)
WCHAR = CharType("wchar_t", 4, True)
CHAR16 = CharType("char16_t", 2, False)
CHAR32 = CharType("char32_t", 4, False)


def _stream_char(tp) -> CharType:
    if isinstance(tp, CharType):
        return tp
    if isinstance(tp, CharArray):
        return tp.element
    return CHAR


def widest_char(target, source) -> CharType:
    """Pick the wider of the stream characters of ``target`` and ``source``."""
    target_char = _stream_char(target)
    source_char = _stream_char(source)
    return target_char if target_char.size > source_char.size else source_char


def lcast_precision(tp) -> int:
    """Stream precision needed to print values of ``tp`` without loss."""
    if isinstance(tp, FloatType) and tp.digits > 0:
        return 2 + tp.digits * 30103 // 100000
    return DEFAULT_PRECISION


def combined_precision(source, target) -> int:
    """Precision that suits both ``source`` and ``target``."""
    return max(lcast_precision(source), lcast_precision(target))
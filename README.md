# lexcast

`lexcast` converts values to their text form and back. The rules are strict,
and a conversion either succeeds completely or fails:

- Integers are written in plain decimal. When read, the text must be an
  optional `+` or `-` followed by digits only, and the value must fit the
  target integer type. Overflow, trailing characters, doubled signs and
  fractional parts are rejected. Unsigned types accept a leading minus and
  wrap the value around, so `"-1"` read as `unsigned int` gives 4294967295.
- Floating-point values are written with enough digits (`%.17g` for
  `double`, `%.9g` for `float`) to survive a round trip. Infinities and
  NaNs are written as `inf`, `-inf`, `nan` and `-nan`. When reading, `inf`,
  `infinity`, `nan` and `nan(...)` are accepted in any letter case, with an
  optional sign. Text that ends in `e`, `E`, `+` or `-` is rejected.
- A boolean is written as `0` or `1`. When read, the text may carry a sign
  and leading zeros (`"+001"`, `"-0"`), but must end in `0` or `1`.
- Characters and fixed-size character arrays follow their size limits. Text
  that does not fit is rejected rather than cut short.

A failed conversion raises `lexcast.types.BadLexicalCast`, a subclass of
`ValueError`.

## Installation

```
pip install lexcast
```

## Library use

The main entry points are in `lexcast.convert`:

- `lexical_cast(target, value)` converts `value` to `target` and returns the
  result, or raises `BadLexicalCast`.
- `try_lexical_convert(target, value)` does the same conversion but returns
  `(True, result)` on success and `(False, None)` on failure.
- `lexical_cast_chars(target, chars, count)` converts the first `count`
  characters of `chars`.
- `make_buffer_view(chars, begin, end)` makes a `BufferView` over
  `chars[begin:end]` (raising `ValueError` for a bad range). `str()` of a
  view gives its characters, and a view can be passed to any conversion.
- `lexical_cast_legacy(target, value)` converts through a single text form,
  without the direct copy used for `str` to `str` or bytes to bytes.

```python
from lexcast.convert import lexical_cast, try_lexical_convert
from lexcast.types import INT, SHORT, UINT, FLOAT, CHAR, CharArray

lexical_cast(INT, "-100")          # -100
lexical_cast(str, 1.5)             # "1.5"
lexical_cast(UINT, "-1")           # 4294967295
lexical_cast(CharArray(CHAR, 4), 100)   # "100"
try_lexical_convert(SHORT, "70000")     # (False, None)
try_lexical_convert(FLOAT, "0.0")       # (True, 0.0)
```

The target may be one of the descriptors below, `bool`, `int` (any size),
`float`, `str`, `bytes` or `bytearray`. Any other callable target is called
with the text, and a `ValueError` or `TypeError` it raises becomes
`BadLexicalCast`. A source that is not a number, a string, bytes, a sequence
of one-character strings or a `BufferView` is turned into text with `str()`.

### Types

`lexcast.types` describes the target types:

- `IntType`, with the ready-made `SHORT`, `USHORT`, `INT`, `UINT`, `LONG`,
  `ULONG`, `LONG_LONG`, `ULONG_LONG`, `INTMAX`, `UINTMAX`, `INT128` and
  `UINT128`. `IntType.contains(value)` tells whether a value is in range;
  `IntType.wrap(value)` reduces a value modulo the type's width.
- `FloatType`, with `FLOAT`, `DOUBLE` and `LONG_DOUBLE`.
- `CharType`, with `CHAR`, `SIGNED_CHAR`, `UNSIGNED_CHAR`, `WCHAR`,
  `CHAR16` and `CHAR32`.
- `CharArray(element, size)`, a fixed array that holds at most `size - 1`
  characters plus a terminating NUL.
- `lcast_precision(tp)` gives the number of significant digits used to
  write a type, `combined_precision(source, target)` the larger of two, and
  `widest_char(target, source)` the wider of two character types.

### Formatters and parsers

- `lexcast.output`: `format_value`, `format_signed`, `format_unsigned`,
  `format_real`, `format_bool` and `format_char_array` (which stops at the
  first NUL).
- `lexcast.input`: `parse_value`, `parse_signed`, `parse_unsigned`,
  `parse_float`, `parse_bool`, `parse_char` and `parse_char_array`.

### Small helpers

```python
from lexcast.examples import args_to_numbers, stringize

args_to_numbers(["1", "x", "-7"])     # [1, 0, -7]: unreadable entries become 0
stringize(("-", 10, "e", 5))          # "-10e5"
stringize((270, "Kelvin"))            # "270Kelvin"
```

`args_to_numbers` reads each argument as a 16-bit signed integer.
`stringize` joins the text forms of all the items in a sequence.

## Command line

```
lexcast-args 12 abc -40 70000
```

This reads each argument as a 16-bit signed integer and prints the numbers
separated by spaces, here `12 0 -40 0`. An argument that cannot be read, or
that is out of range, becomes `0`. With no arguments nothing is printed.

## Limits

- Parsing follows the C locale only: thousands separators and other decimal
  separators are not understood.
- `LONG_DOUBLE` values are held as Python floats, so they have the range and
  precision of `double`.

## Running the tests

```
pip install -e ".[test]"
pytest
```
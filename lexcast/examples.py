"""Small worked uses of the conversion functions."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .convert import lexical_cast
from .types import SHORT, BadLexicalCast


def args_to_numbers(args: Iterable[str]) -> list[int]:
    """Read each argument as a ``short``; unreadable ones become 0."""
    numbers = []
    for arg in args:
        try:
            numbers.append(lexical_cast(SHORT, arg))
        except BadLexicalCast:
            numbers.append(0)
    return numbers


def stringize(sequence: Iterable) -> str:
    """Join the text forms of every element of ``sequence``."""
    return "".join(lexical_cast(str, item) for item in sequence)


def main(argv: Sequence[str] | None = None) -> int:
    """Treat the command-line arguments as numbers and print them."""
    if argv is None:
        argv = sys.argv[1:]
    numbers = args_to_numbers(argv)
    if numbers:
        print(" ".join(str(number) for number in numbers))
    return 0
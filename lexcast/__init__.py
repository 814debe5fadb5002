"""Strict lexical conversions between text and integer, float, boolean and character values."""

__version__ = "1.0.0"
"""Numeric literal classification shared by the lexer and parser."""

from __future__ import annotations

import math
import re
from typing import Final

_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?", re.ASCII)

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
_INT64_MAX_DIGITS: Final[int] = len(str(INT64_MAX))


def parse_int(text: str) -> int | None:
    """Whole-text signed 64-bit integer parse."""
    if not _INTEGER_RE.fullmatch(text):
        return None
    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("+-").lstrip("0") or "0"
    # Checked before int() so huge literals never reach its digit limit.
    if len(digits) > _INT64_MAX_DIGITS:
        return None
    value = sign * int(digits)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_float(text: str) -> float | None:
    """Whole-text finite double parse; literals that overflow are rejected."""
    if not _FLOAT_RE.fullmatch(text):
        return None
    value = float(text)
    if math.isinf(value):
        return None
    return value


def parse_number(text: str) -> int | float | None:
    """Integer if the whole text is one, else float, else None.

    Integers outside the 64-bit range fall through to the float parse,
    which in turn rejects anything beyond the double range.
    """
    int_value = parse_int(text)
    if int_value is not None:
        return int_value
    return parse_float(text)


def is_number_literal(text: str) -> bool:
    return parse_number(text) is not None


__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "is_number_literal",
    "parse_float",
    "parse_int",
    "parse_number",
]

"""Counting, averaging and converting values into colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

U32_MAX = 2**32 - 1


def byte_counter(arg: str) -> int:
    """Number of bytes in the UTF-8 encoding of the string."""
    return len(arg.encode("utf-8"))


def char_counter(arg: str) -> int:
    """Number of characters in the string."""
    return len(arg)


def num_sq(value: int) -> int:
    """Square an unsigned 32-bit number."""
    if value < 0 or value > U32_MAX:
        raise ValueError(f"{value} is not an unsigned 32-bit number")
    result = value * value
    if result > U32_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


def average(values: Sequence[float]) -> float:
    """Arithmetic mean; NaN for an empty sequence."""
    if not values:
        return math.nan
    return sum(values) / len(values)


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int


class IntoColorError(ValueError):
    """A value could not be converted into a colour."""


class BadLenError(IntoColorError):
    """The wrong number of components was given."""


class IntConversionError(IntoColorError):
    """A component lies outside 0..=255."""


def color_from(values: Sequence[int]) -> Color:
    """Build a colour from exactly three components in 0..=255."""
    if len(values) != 3:
        raise BadLenError(f"expected 3 components, got {len(values)}")
    if any(not 0 <= v <= 255 for v in values):
        raise IntConversionError(f"components out of range: {tuple(values)}")
    red, green, blue = values
    return Color(red, green, blue)
"""Name tags, token costs and positive non-zero integers, with errors raised on bad input."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

PROCESSING_FEE = 1
COST_PER_ITEM = 5

_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, with strict digit rules."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Token cost of buying the typed-in number of items, fee included."""
    qty = _parse_int(item_quantity, 32)
    cost = qty * COST_PER_ITEM + PROCESSING_FEE
    if not -(2**31) <= cost <= 2**31 - 1:
        raise OverflowError("arithmetic overflow computing the total cost")
    return cost


def afford(tokens: int, item_quantity: str) -> str:
    """Describe whether the purchase fits within the tokens held."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationError(ValueError):
    """A value could not become a positive non-zero integer."""

    class Kind(enum.Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    def __init__(self, kind: CreationError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.Kind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.Kind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing failed, either on the digits or on the value's sign."""

    def __init__(self, source: ValueError) -> None:
        super().__init__(str(source))
        self.source = source


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse a positive non-zero integer; raise ParsePosNonzeroError otherwise."""
    try:
        value = _parse_int(s, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err
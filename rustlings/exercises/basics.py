"""Small functions on numbers, strings and lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

ICECREAM_PIECES = 5
LAST_ICECREAM_HOUR = 10


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of icecream left at a given hour, or None once they are gone."""
    if time_of_day > LAST_ICECREAM_HOUR:
        return None
    return ICECREAM_PIECES


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    a = (10, 20, 30, 40)
    return a, list(a)


def vec_loop(v: list[int]) -> list[int]:
    """Double every element in place and return the list."""
    v[:] = [x * 2 for x in v]
    return v


def vec_map(v: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [num * 2 for num in v]


@dataclass
class Wrapper(Generic[T]):
    value: T


def longest(x: str, y: str) -> str:
    """The longer string; the second one on a tie."""
    return x if len(x) > len(y) else y
"""Apple pricing, a small string transformer and printable report cards."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

G = TypeVar("G")

BULK_THRESHOLD = 40


def calculate_price_of_apples(x: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return x if x > BULK_THRESHOLD else 2 * x


class Command(enum.Enum):
    """A transformation without parameters."""

    UPPERCASE = "uppercase"
    TRIM = "trim"


@dataclass(frozen=True)
class Append:
    """Append "bar" to the string this many times."""

    times: int

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")


def _apply(string: str, command: Command | Append) -> str:
    if isinstance(command, Append):
        return string + "bar" * command.times
    if command is Command.UPPERCASE:
        return string.upper()
    if command is Command.TRIM:
        return string.strip()
    raise TypeError(f"unknown command: {command!r}")


def transformer(items: Iterable[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    return [_apply(string, command) for string, command in items]


def _display(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class ReportCard(Generic[G]):
    """A student's report card with a numeric or alphabetical grade."""

    grade: G
    student_name: str
    student_age: int

    def print(self) -> str:
        """The report card as one line of text."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )
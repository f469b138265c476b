"""Parsing people from "name,age" strings."""

from __future__ import annotations

import re
from dataclasses import dataclass

USIZE_MAX = 2**64 - 1
_DIGITS = re.compile(r"\+?[0-9]+", re.ASCII)


@dataclass(frozen=True)
class Person:
    name: str = "John"
    age: int = 30


class ParsePersonError(ValueError):
    """A string could not be parsed into a person."""


class EmptyError(ParsePersonError):
    """The input string was empty."""


class BadLenError(ParsePersonError):
    """The input did not have exactly two fields."""


class NoNameError(ParsePersonError):
    """The name field was empty."""


class ParseIntError(ParsePersonError):
    """The age field was not an unsigned integer."""


def _parse_usize(text: str) -> int:
    if not text:
        raise ParseIntError("cannot parse integer from empty string")
    if not _DIGITS.fullmatch(text):
        raise ParseIntError("invalid digit found in string")
    value = int(text)
    if value > USIZE_MAX:
        raise ParseIntError("number too large to fit in target type")
    return value


def parse_person(s: str) -> Person:
    """Parse "name,age"; raise a ParsePersonError subclass on bad input."""
    if not s:
        raise EmptyError("empty input")
    fields = s.split(",")
    if len(fields) != 2:
        raise BadLenError(f"expected 2 fields, got {len(fields)}")
    name, age = fields
    if not name:
        raise NoNameError("empty name")
    return Person(name=name, age=_parse_usize(age))


def person_from(s: str) -> Person:
    """Parse "name,age", falling back to the default person on bad input."""
    try:
        return parse_person(s)
    except ParsePersonError:
        return Person()
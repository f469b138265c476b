"""Shared behaviour through base classes and single dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or the item "Bar" to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    value.append("Bar")
    return value


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two licensed items carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


@dataclass
class SomeStruct:
    name: str

    def some_function(self) -> bool:
        return True

    def other_function(self) -> bool:
        return True


def some_func(item) -> bool:
    """Require both capabilities of the item."""
    return item.some_function() and item.other_function()
"""Lessons on traits: appending "Bar", shared licensing info, combined behaviour."""

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
    return [*value, "Bar"]


class Licensed:
    """Something that carries licensing information."""

    def licensing_info(self) -> str:
        """Return the licensing information."""
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int = 1


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str = "v2.0.0"


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Return True if both items carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class _SomeTrait:
    def some_function(self) -> bool:
        return True


class _OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(_SomeTrait, _OtherTrait):
    """A type with both behaviours."""


class OtherStruct(_SomeTrait, _OtherTrait):
    """Another type with both behaviours."""


def some_func(item) -> bool:
    """Return True if both behaviours of item agree."""
    return item.some_function() and item.other_function()
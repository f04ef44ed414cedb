"""Lessons on lists, strings and a generic wrapper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Return the values each multiplied by two."""
    doubled = list(values)
    for i, value in enumerate(doubled):
        doubled[i] = value * 2
    return doubled


def vec_map(values: Iterable[int]) -> list[int]:
    """Return the values each multiplied by two, built by mapping."""
    return [value * 2 for value in values]


def current_favorite_color() -> str:
    """Return the favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Return True for the colour words green, blue and red."""
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!"."""
    return text + " world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T
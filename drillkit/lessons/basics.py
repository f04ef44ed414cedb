"""Lessons on functions and conditionals."""

from __future__ import annotations


def call_me() -> int:
    """Return one."""
    return 1


def ring_calls(num: int) -> list[str]:
    """Return one ring message per call, numbered from one."""
    return [f"Ring! Call number {i}" for i in range(1, num + 1)]


def is_even(num: int) -> bool:
    """Return True for even numbers."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off even prices and 3 off odd ones."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return the square of num."""
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map fizz to foo, fuzz to bar and anything else to baz."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def animal_habitat(animal: str) -> str:
    """Return where an animal lives, or Unknown."""
    return _HABITATS.get(animal, "Unknown")
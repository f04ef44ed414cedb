"""Quiz lessons: pricing, a small string machine and report cards."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable


def calculate_price_of_apples(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return quantity if quantity > 40 else quantity * 2


class CommandKind(enum.Enum):
    """What a command does to a string."""

    UPPERCASE = enum.auto()
    TRIM = enum.auto()
    APPEND = enum.auto()


@dataclass(frozen=True)
class Command:
    """A transformation; APPEND adds "bar" `times` times."""

    kind: CommandKind
    times: int = 0

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")

    def apply(self, text: str) -> str:
        """Return text transformed by this command."""
        match self.kind:
            case CommandKind.UPPERCASE:
                return text.upper()
            case CommandKind.TRIM:
                return text.strip()
            case CommandKind.APPEND:
                return text + "bar" * self.times
        raise ValueError(f"unknown command kind: {self.kind!r}")


def transformer(pairs: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [command.apply(text) for text, command in pairs]


@dataclass
class ReportCard:
    """A student's report card with a numeric or alphabetic grade."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        """Return the report line."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )
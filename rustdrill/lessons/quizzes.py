"""Quiz solutions: apple pricing, a string machine and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


def calculate_price_of_apples(quantity: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    if quantity > 40:
        return quantity
    return quantity * 2


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the string."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append:
    """Append 'bar' count times."""

    count: int


Command = Uppercase | Trim | Append


def transformer(items: list[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""

    def apply(text: str, command: Command) -> str:
        match command:
            case Uppercase():
                return text.upper()
            case Trim():
                return text.strip()
            case Append(count=count):
                return text + "bar" * count
        raise TypeError(f"unknown command: {command!r}")

    return [apply(text, command) for text, command in items]


T = TypeVar("T")


@dataclass
class ReportCard(Generic[T]):
    """A student's report card with a grade of any printable kind."""

    grade: T
    student_name: str
    student_age: int

    def report(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )
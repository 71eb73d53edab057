"""Solutions to the iterator lessons: stepping, mapping, dividing and counting."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum

_U64_MAX = 2**64 - 1


def favourite_fruits() -> Iterator[str]:
    """An iterator over a fixed list of favourite fruits, in order."""
    return iter(["banana", "custard apple", "avocado", "peach", "raspberry"])


def capitalize_first(text: str) -> str:
    """Upper-case the first character of text and keep the rest as it is."""
    return text[:1].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize the first character of every word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize every word and join them with nothing in between."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division that the lesson refuses to carry out."""


class NotDivisibleError(DivisionError):
    """The dividend is not an exact multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Return a divided by b when b divides a exactly."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """Divide each number by 27; the first failure is raised."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each number by 27, keeping each result or error in place."""

    def attempt(n: int) -> int | DivisionError:
        try:
            return divide(n, 27)
        except DivisionError as err:
            return err

    return [attempt(n) for n in _NUMBERS]


def factorial(num: int) -> int:
    """The product 1 * 2 * ... * num; 1 for zero."""
    if num < 0:
        raise ValueError("factorial of a negative number")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in 64 bits")
    return result


class Progress(Enum):
    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across several maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)
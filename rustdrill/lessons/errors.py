"""Solutions to the error-handling lessons: name tags, token costs and checked integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_SIGNED = re.compile(r"([+-]?)([0-9]+)")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, with the usual error messages."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    match = _SIGNED.fullmatch(text)
    if match is None:
        raise ValueError("invalid digit found in string")
    sign, digits = match.groups()
    value = -int(digits) if sign == "-" else int(digits)
    limit = 2 ** (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name-tag text; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Five tokens per item plus a one-token processing fee."""
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_int(item_quantity, 32)
    return quantity * cost_per_item + processing_fee


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Buy the typed quantity if affordable; return the tokens left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A PositiveNonzeroInteger could not be created."""


class NegativeNumber(CreationError):
    """The value was negative."""

    def __init__(self) -> None:
        super().__init__("number is negative")


class ZeroNumber(CreationError):
    """The value was zero."""

    def __init__(self) -> None:
        super().__init__("number is zero")


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeNumber()
        if self.value == 0:
            raise ZeroNumber()


class ParsePosNonzeroError(ValueError):
    """Text could not be turned into a PositiveNonzeroInteger.

    ``cause`` holds either a CreationError or the ValueError from parsing.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @property
    def is_creation(self) -> bool:
        return isinstance(self.cause, CreationError)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer and check that it is positive and nonzero."""
    try:
        value = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err
"""Solutions to the introductory lessons: branches, functions, strings and lists."""

from __future__ import annotations

from dataclasses import dataclass


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off even prices, three off odd ones."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def maybe_icecream(time_of_day: int) -> int | None:
    """Five pieces are left before 22:00, none from then on."""
    if time_of_day < 22:
        return 5
    return None


def trim_me(text: str) -> str:
    return text.strip()


def compose_me(text: str) -> str:
    return f"{text} world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")


def fill_vec(values: list[int] | None = None) -> list[int]:
    """Return a new list with 22, 44 and 66 appended."""
    return [*(values or []), 22, 44, 66]


def last_char(data: str) -> str:
    """Return the last character; an empty string has none."""
    if not data:
        raise ValueError("empty string has no last character")
    return data[-1]


def longest(x: str, y: str) -> str:
    """Return the longer string by UTF-8 length, the second one on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y


@dataclass(frozen=True)
class Cons:
    """A cell of a cons list; None marks the empty list."""

    value: int
    rest: Cons | None = None


def create_empty_list() -> Cons | None:
    return None


def create_non_empty_list() -> Cons:
    return Cons(1, None)
"""Solutions to the struct, enum, generic and trait lessons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


@dataclass
class ColorClassic:
    """A named colour with its hex code."""

    name: str
    hex: str


class UnitLike:
    """A type without fields."""

    def __repr__(self) -> str:
        return type(self).__name__

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))


@dataclass
class Order:
    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass
class Package:
    """A package to ship; its weight must be positive."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


@dataclass
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    color: tuple[int, int, int]


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Quit:
    pass


Message = ChangeColor | Echo | Move | Quit


@dataclass
class MachineState:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point | None = None
    quit: bool = False

    def __post_init__(self) -> None:
        if self.position is None:
            self.position = Point(0, 0)

    def process(self, message: Message) -> None:
        match message:
            case ChangeColor(color=color):
                self.color = color
            case Echo(text=text):
                print(text)
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


T = TypeVar("T")


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


def append_bar(value: str | list[str]) -> str | list[str]:
    """Append "Bar" to a string, or add "Bar" as a new item to a list."""
    match value:
        case str():
            return value + "Bar"
        case list():
            return [*value, "Bar"]
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


class Licensed:
    """Shared licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int = 1


@dataclass
class OtherSoftware(Licensed):
    version_number: str = "v2.0.0"


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    return software.licensing_info() == software_two.licensing_info()


@dataclass
class SomeStruct:
    name: str = ""

    def some_function(self) -> bool:
        return True

    def other_function(self) -> bool:
        return True


def some_func(item: SomeStruct) -> bool:
    """True when the item answers True to both of its functions."""
    return item.some_function() and item.other_function()
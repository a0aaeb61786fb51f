"""Card, Color and Side types for UNO Flip."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Side(str, Enum):
    """Which face of every card is active."""

    LIGHT = "light"
    DARK = "dark"

    def flipped(self) -> "Side":
        return Side.DARK if self is Side.LIGHT else Side.LIGHT


class Color(str, Enum):
    """Light side colors."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


class DarkColor(str, Enum):
    """Dark side colors."""

    ORANGE = "orange"
    PINK = "pink"
    PURPLE = "purple"
    TEAL = "teal"


class Value(str, Enum):
    """Light side values."""

    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    DRAW_ONE = "draw_one"
    REVERSE = "reverse"
    SKIP = "skip"
    FLIP = "flip"
    WILD = "wild"
    WILD_DRAW_TWO = "wild_draw_two"


class DarkValue(str, Enum):
    """Dark side values."""

    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    DRAW_FIVE = "draw_five"
    REVERSE = "reverse"
    SKIP_ALL = "skip_all"
    FLIP = "flip"
    WILD = "wild"
    WILD_STACK = "wild_stack"


AnyColor = Union[Color, DarkColor]
AnyValue = Union[Value, DarkValue]

WILD_VALUES = {
    Side.LIGHT: (Value.WILD, Value.WILD_DRAW_TWO),
    Side.DARK: (DarkValue.WILD, DarkValue.WILD_STACK),
}

SIDE_COLORS = {
    Side.LIGHT: tuple(Color),
    Side.DARK: tuple(DarkColor),
}


def is_wild_value(value: AnyValue) -> bool:
    return value in WILD_VALUES[Side.LIGHT] or value in WILD_VALUES[Side.DARK]


def is_number_value(value: AnyValue) -> bool:
    return value.value.isdigit()


def color_side(color: AnyColor) -> Side:
    return Side.LIGHT if isinstance(color, Color) else Side.DARK


@dataclass(frozen=True)
class Face:
    """One side of a card.

    Wild faces carry color=None; every other face has a color of the matching side.
    """

    color: Optional[AnyColor]
    value: AnyValue

    def __str__(self) -> str:
        if self.color is None:
            return self.value.name
        return f"{self.color.name}_{self.value.name}"


@dataclass(frozen=True, eq=False)
class Card:
    """An UNO Flip card with a light face and a dark face.

    Cards compare by identity: two cards printed with the same faces are still
    two cards in a hand.
    """

    light_color: Optional[Color]
    light_value: Value
    dark_color: Optional[DarkColor]
    dark_value: DarkValue

    def __post_init__(self) -> None:
        if not isinstance(self.light_value, Value):
            raise ValueError(f"Invalid light value: {self.light_value!r}")
        if not isinstance(self.dark_value, DarkValue):
            raise ValueError(f"Invalid dark value: {self.dark_value!r}")
        if self.light_color is not None and not isinstance(self.light_color, Color):
            raise ValueError(f"Invalid light color: {self.light_color!r}")
        if self.dark_color is not None and not isinstance(self.dark_color, DarkColor):
            raise ValueError(f"Invalid dark color: {self.dark_color!r}")
        if self.light_color is None and not is_wild_value(self.light_value):
            raise ValueError("Non-wild light face must have a color")
        if self.dark_color is None and not is_wild_value(self.dark_value):
            raise ValueError("Non-wild dark face must have a color")

    @property
    def light(self) -> Face:
        return Face(self.light_color, self.light_value)

    @property
    def dark(self) -> Face:
        return Face(self.dark_color, self.dark_value)

    def face(self, side: Side) -> Face:
        """Return the face that counts while `side` is active."""
        return self.light if side is Side.LIGHT else self.dark

    def is_wild(self, side: Side) -> bool:
        return self.face(side).value in WILD_VALUES[side]

    def is_action(self, side: Side) -> bool:
        return not is_number_value(self.face(side).value)

    def __str__(self) -> str:
        return f"{self.light}/{self.dark}"

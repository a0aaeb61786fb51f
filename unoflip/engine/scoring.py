"""Round scoring tables."""

from typing import Dict, Iterable

from unoflip.engine.card import AnyValue, Card, DarkValue, Side, Value, is_number_value

LIGHT_POINTS: Dict[Value, int] = {
    Value.DRAW_ONE: 10,
    Value.REVERSE: 20,
    Value.SKIP: 20,
    Value.FLIP: 20,
    Value.WILD: 50,
    Value.WILD_DRAW_TWO: 40,
}

DARK_POINTS: Dict[DarkValue, int] = {
    DarkValue.DRAW_FIVE: 20,
    DarkValue.REVERSE: 20,
    DarkValue.FLIP: 20,
    DarkValue.SKIP_ALL: 30,
    DarkValue.WILD: 50,
    DarkValue.WILD_STACK: 60,
}

POINT_TABLES = {
    Side.LIGHT: LIGHT_POINTS,
    Side.DARK: DARK_POINTS,
}


def card_points(value: AnyValue, side: Side) -> int:
    """Points a single face is worth to the round winner."""
    if is_number_value(value):
        return int(value.value)
    return POINT_TABLES[side][value]


def hand_points(cards: Iterable[Card], side: Side) -> int:
    return sum(card_points(card.face(side).value, side) for card in cards)

"""Card sources: where dealt and drawn cards come from."""

import random
from collections import deque
from typing import Iterable, List, Optional, Protocol

from unoflip.engine.card import Card, Color, DarkColor, DarkValue, Value

NUMBER_VALUES = (
    Value.ONE, Value.TWO, Value.THREE, Value.FOUR, Value.FIVE,
    Value.SIX, Value.SEVEN, Value.EIGHT, Value.NINE,
)
DARK_NUMBER_VALUES = (
    DarkValue.ONE, DarkValue.TWO, DarkValue.THREE, DarkValue.FOUR, DarkValue.FIVE,
    DarkValue.SIX, DarkValue.SEVEN, DarkValue.EIGHT, DarkValue.NINE,
)
ACTION_VALUES = (Value.DRAW_ONE, Value.REVERSE, Value.SKIP, Value.FLIP)
DARK_ACTION_VALUES = (DarkValue.DRAW_FIVE, DarkValue.REVERSE, DarkValue.SKIP_ALL, DarkValue.FLIP)


def _light_faces() -> List[tuple]:
    """Light faces of a 112-card UNO Flip deck.

    - 4 colors × 2 × (1-9, Draw One, Reverse, Skip, Flip): 104 faces
    - 4 Wild, 4 Wild Draw Two: 8 faces
    """
    faces = []
    for color in Color:
        for value in NUMBER_VALUES + ACTION_VALUES:
            faces.append((color, value))
            faces.append((color, value))
    for _ in range(4):
        faces.append((None, Value.WILD))
        faces.append((None, Value.WILD_DRAW_TWO))
    return faces


def _dark_faces() -> List[tuple]:
    faces = []
    for color in DarkColor:
        for value in DARK_NUMBER_VALUES + DARK_ACTION_VALUES:
            faces.append((color, value))
            faces.append((color, value))
    for _ in range(4):
        faces.append((None, DarkValue.WILD))
        faces.append((None, DarkValue.WILD_STACK))
    return faces


LIGHT_FACES = tuple(_light_faces())
DARK_FACES = tuple(_dark_faces())


class CardSource(Protocol):
    """Anything that can hand out a fresh card on demand."""

    def draw(self) -> Card:
        ...


class RandomCardSource:
    """Unbounded source: every draw pairs a random light face with a random dark face.

    Faces are weighted by how often they appear in a printed deck, so wilds stay rare.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def draw(self) -> Card:
        light_color, light_value = self._rng.choice(LIGHT_FACES)
        dark_color, dark_value = self._rng.choice(DARK_FACES)
        return Card(light_color, light_value, dark_color, dark_value)


class ScriptedCardSource:
    """Hands out queued cards first, then falls back to another source.

    Used by tests to make draws deterministic.
    """

    def __init__(self, cards: Iterable[Card] = (), fallback: Optional[CardSource] = None):
        self._queue: deque[Card] = deque(cards)
        self._fallback = fallback if fallback is not None else RandomCardSource(seed=0)

    def queue(self, *cards: Card) -> None:
        self._queue.extend(cards)

    @property
    def remaining(self) -> int:
        """Queued cards not drawn yet."""
        return len(self._queue)

    def draw(self) -> Card:
        if self._queue:
            return self._queue.popleft()
        return self._fallback.draw()

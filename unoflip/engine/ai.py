"""Heuristic for automated players."""

from collections import Counter
from typing import Iterable, Optional, Sequence

from unoflip.engine.card import SIDE_COLORS, AnyColor, Card, Side


def choose_card(playable: Sequence[Card], side: Side) -> Optional[Card]:
    """Pick a card to play: any action card beats a number card.

    Returns None when nothing is playable.
    """
    for card in playable:
        if card.is_action(side):
            return card
    return playable[0] if playable else None


def choose_color(hand: Iterable[Card], side: Side) -> AnyColor:
    """Declare the color the hand holds most of on the active side."""
    counts = Counter(
        card.face(side).color for card in hand if card.face(side).color is not None
    )
    if not counts:
        return SIDE_COLORS[side][0]
    return counts.most_common(1)[0][0]

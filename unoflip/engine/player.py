"""Player at the table."""

from typing import List, Tuple

from unoflip.engine.card import Card


class Player:
    """A named participant, human or AI.

    The engine is the only code that changes a hand; everyone else reads the
    `hand` snapshot.
    """

    def __init__(self, name: str, is_ai: bool = False):
        self.name = name
        self.is_ai = is_ai
        self.score = 0  # running match total
        self._hand: List[Card] = []

    @property
    def hand(self) -> Tuple[Card, ...]:
        return tuple(self._hand)

    def add_card(self, card: Card) -> None:
        self._hand.append(card)

    def remove_card(self, card: Card) -> bool:
        """Remove this exact card instance; return False if it was not held."""
        for i, held in enumerate(self._hand):
            if held is card:
                del self._hand[i]
                return True
        return False

    def holds(self, card: Card) -> bool:
        return any(held is card for held in self._hand)

    def clear_hand(self) -> None:
        self._hand.clear()

    def has_no_cards(self) -> bool:
        return not self._hand

    def __len__(self) -> int:
        return len(self._hand)

    def __repr__(self) -> str:
        kind = "ai" if self.is_ai else "human"
        return f"Player({self.name!r}, {kind}, {len(self._hand)} cards, score={self.score})"

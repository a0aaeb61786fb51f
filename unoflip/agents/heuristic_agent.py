"""Heuristic agent - the built-in computer player."""

from typing import Optional, Sequence

from unoflip.engine import Card, PlayerView, ai
from unoflip.engine.card import AnyColor


class HeuristicAgent:
    """Plays action cards first and declares its most-held color."""

    def __init__(self, name: str = "bot"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def choose_card(self, player_view: PlayerView, playable: Sequence[Card]) -> Optional[Card]:
        return ai.choose_card(playable, player_view.side)

    def choose_color(self, player_view: PlayerView, options: Sequence[AnyColor]) -> AnyColor:
        color = ai.choose_color(player_view.my_hand, player_view.side)
        return color if color in options else options[0]

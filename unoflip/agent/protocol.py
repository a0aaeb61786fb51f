"""Agent protocol - interface that heuristic, LLM and human agents implement."""

from typing import Optional, Protocol, Sequence

from unoflip.engine import Card, PlayerView
from unoflip.engine.card import AnyColor


class AgentProtocol(Protocol):
    """Interface for UNO Flip-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the agent."""
        ...

    def choose_card(self, player_view: PlayerView, playable: Sequence[Card]) -> Optional[Card]:
        """Choose a card to play.

        Args:
            player_view: Filtered view with only this player's hand and public info.
            playable: Cards from the hand that may legally be played right now.

        Returns:
            One of the playable cards, or None to draw instead.
        """
        ...

    def choose_color(self, player_view: PlayerView, options: Sequence[AnyColor]) -> AnyColor:
        """Choose the color to declare after playing a wild-class card."""
        ...

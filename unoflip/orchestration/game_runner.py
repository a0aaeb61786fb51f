"""Match runner: drives GameState turn by turn through agents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from unoflip.agents.heuristic_agent import HeuristicAgent
from unoflip.agents.human_agent import HumanAgent
from unoflip.config import GameConfig
from unoflip.engine import GameState, Player, PlayerView, RandomCardSource, Side
from unoflip.engine.card import SIDE_COLORS
from unoflip.engine.deck import CardSource

if TYPE_CHECKING:
    from unoflip.agent.protocol import AgentProtocol

log = logging.getLogger(__name__)


@dataclass
class RoundResult:
    """Result of a completed (or abandoned) round."""

    winner: Optional[str]
    points: int
    num_turns: int
    side: Side


@dataclass
class MatchResult:
    """Result of a completed match."""

    winner: Optional[str]
    scores: Dict[str, int]
    rounds: List[RoundResult] = field(default_factory=list)


class GameRunner:
    """Runs UNO Flip rounds to completion.

    Players without a registered agent get a HeuristicAgent when they are AI
    and a HumanAgent otherwise.
    """

    def __init__(
        self,
        state: GameState,
        agents: Optional[Dict[str, "AgentProtocol"]] = None,
        max_turns_per_round: int = 1000,
        max_rounds: int = 100,
    ):
        self.state = state
        self._agents: Dict[str, "AgentProtocol"] = dict(agents or {})
        self._max_turns = max_turns_per_round
        self._max_rounds = max_rounds
        self._automated_turn_in_progress = False

    @classmethod
    def from_config(
        cls,
        players: Sequence[Tuple[str, bool]],
        config: Optional[GameConfig] = None,
        agents: Optional[Dict[str, "AgentProtocol"]] = None,
        card_source: Optional[CardSource] = None,
    ) -> "GameRunner":
        """Seat `(name, is_ai)` players at a fresh table."""
        config = config or GameConfig()
        if card_source is None:
            card_source = RandomCardSource(seed=config.seed)
        state = GameState(
            card_source=card_source,
            hand_size=config.hand_size,
            winning_score=config.winning_score,
        )
        for name, is_ai in players:
            state.add_player(name, is_ai)
        return cls(state, agents, max_turns_per_round=config.max_turns_per_round)

    def agent_for(self, player: Player) -> "AgentProtocol":
        agent = self._agents.get(player.name)
        if agent is None:
            agent = HeuristicAgent(player.name) if player.is_ai else HumanAgent(player.name)
            self._agents[player.name] = agent
        return agent

    def resolve_wild_stack(self) -> int:
        """Make the forced drawer draw until the declared color; return cards drawn."""
        drawn = 0
        while self.state.is_wild_stack_card():
            self.state.wild_stack()
            drawn += 1
        return drawn

    def take_turn(self) -> bool:
        """Let the current player's agent act once. Returns True if the round ended."""
        state = self.state
        player = state.get_curr_player()
        agent = self.agent_for(player)
        playable = state.get_playable_cards(player)
        view = PlayerView.from_state(state, player)
        card = agent.choose_card(view, playable) if playable else None

        if card is None:
            state.draw_card()
            state.advance()
            return False

        color = None
        if card.is_wild(state.side):
            color = agent.choose_color(view, SIDE_COLORS[state.side])
        moved = state.play(card, color)
        if state.is_deck_empty():
            return True
        self.resolve_wild_stack()
        if not moved:
            state.advance()
        return False

    def run_automated_turns(self) -> bool:
        """Play AI turns until a human is up or the round ends.

        Returns True if the round ended. Raises RuntimeError when called while
        already running, e.g. from an agent callback.
        """
        if self._automated_turn_in_progress:
            raise RuntimeError("Automated turns are already running")
        self._automated_turn_in_progress = True
        try:
            turns = 0
            while self.state.get_curr_player().is_ai and turns < self._max_turns:
                if self.take_turn():
                    return True
                turns += 1
            return self.state.is_deck_empty()
        finally:
            self._automated_turn_in_progress = False

    def run_round(self) -> RoundResult:
        """Deal and play one round; credit the winner's points."""
        state = self.state
        state.new_round()
        num_turns = 0
        ended = False
        while num_turns < self._max_turns and not ended:
            ended = self.take_turn()
            num_turns += 1

        if not ended:
            log.warning("Round %d stopped after %d turns", state.round_number, num_turns)
            return RoundResult(winner=None, points=0, num_turns=num_turns, side=state.side)

        winner = state.get_curr_player()
        points = state.get_score(winner)
        log.info("Round %d won by %s for %d points", state.round_number, winner.name, points)
        return RoundResult(winner=winner.name, points=points, num_turns=num_turns, side=state.side)

    def run(self) -> MatchResult:
        """Play rounds until someone reaches the winning score."""
        rounds: List[RoundResult] = []
        champion: Optional[Player] = None
        while champion is None and len(rounds) < self._max_rounds:
            result = self.run_round()
            rounds.append(result)
            if result.winner is None:
                continue
            winner = next(p for p in self.state.players if p.name == result.winner)
            if self.state.check_winner(winner):
                champion = winner

        return MatchResult(
            winner=champion.name if champion is not None else None,
            scores={p.name: p.score for p in self.state.players},
            rounds=rounds,
        )

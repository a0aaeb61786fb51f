"""Game state for UNO Flip."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from unoflip.engine import ai, rules
from unoflip.engine.card import AnyColor, Card, Color, DarkColor, Side, color_side
from unoflip.engine.deck import CardSource, RandomCardSource
from unoflip.engine.errors import InvalidConfigurationError, InvalidMoveError
from unoflip.engine.player import Player
from unoflip.engine.scoring import hand_points

log = logging.getLogger(__name__)

HAND_SIZE = 7
WINNING_SCORE = 500


@dataclass
class WildStackState:
    """Progress of a dark-side Wild Draw Color: someone draws until the color shows up."""

    active: bool = False
    target_color: Optional[DarkColor] = None
    drawer_index: Optional[int] = None


class GameState:
    """Mutable UNO Flip game state and every operation that changes it.

    One instance lives for a whole match; `new_round` re-deals between rounds.
    """

    def __init__(
        self,
        card_source: Optional[CardSource] = None,
        hand_size: int = HAND_SIZE,
        winning_score: int = WINNING_SCORE,
    ):
        self.card_source: CardSource = card_source if card_source is not None else RandomCardSource()
        self.hand_size = hand_size
        self.winning_score = winning_score
        self.players: List[Player] = []
        self.current_index = 0
        self.direction = 1  # 1 = clockwise, -1 = counter-clockwise
        self.side = Side.LIGHT
        self.top_card: Optional[Card] = None
        self.discard_pile: List[Card] = []  # top is last
        self.active_wild_color: Optional[AnyColor] = None
        self.wild_stack_state = WildStackState()
        self.round_number = 0
        self.history: List[str] = []  # Log of events
        self._scored_round: Optional[int] = None

    # --- setup ---

    def add_player(self, name: str, is_ai: bool = False) -> Player:
        if any(p.name == name for p in self.players):
            raise InvalidConfigurationError(f"Duplicate player name: {name}")
        player = Player(name, is_ai)
        self.players.append(player)
        return player

    def new_round(self) -> None:
        """Deal a fresh round. The active side carries over from the last round."""
        if len(self.players) < 2:
            raise InvalidConfigurationError(
                f"At least 2 players are required, got {len(self.players)}"
            )
        self.round_number += 1
        self.current_index = 0
        self.direction = 1
        self.discard_pile = []
        self.active_wild_color = None
        self.wild_stack_state = WildStackState()
        for player in self.players:
            player.clear_hand()
        for _ in range(self.hand_size):
            for player in self.players:
                player.add_card(self.card_source.draw())
        # First card: must not be wild on either face
        first = self.card_source.draw()
        while first.is_wild(Side.LIGHT) or first.is_wild(Side.DARK):
            first = self.card_source.draw()
        self.top_card = first
        self.discard_pile.append(first)
        self._log(f"Round {self.round_number} dealt, top card {first.face(self.side)}")

    # --- queries ---

    def get_curr_player(self) -> Player:
        self._require_players()
        return self.players[self.current_index]

    def get_next_player(self) -> Player:
        return self.players[self._next_index()]

    def get_top_card(self) -> Optional[Card]:
        return self.top_card

    def set_top_card(self, card: Card) -> None:
        """Put a card on the discard pile without playing it from a hand."""
        self._require_no_wild_stack()
        self.top_card = card
        self.discard_pile.append(card)
        self.active_wild_color = None

    def get_side(self) -> Side:
        return self.side

    def get_effective_color(self) -> Optional[AnyColor]:
        return rules.effective_color(self)

    def is_playable(self, card: Card) -> bool:
        return rules.card_matches(card, self)

    def get_playable_cards(self, player: Player) -> List[Card]:
        return [c for c in player.hand if self.is_playable(c)]

    def curr_player_has_playable_card(self) -> bool:
        return bool(self.get_playable_cards(self.get_curr_player()))

    def is_wild_stack_card(self) -> bool:
        return self.wild_stack_state.active

    def is_deck_empty(self) -> bool:
        """True once the current player has emptied their hand (round over)."""
        return self.get_curr_player().has_no_cards()

    # --- turn order ---

    def advance(self) -> None:
        self._require_no_wild_stack()
        self.current_index = self._next_index()

    def reverse(self) -> None:
        self._require_no_wild_stack()
        self.direction = -self.direction
        self._log(f"{self.get_curr_player().name} reversed the order")

    def skip(self) -> None:
        self._require_no_wild_stack()
        skipped = self.get_next_player()
        self.advance()
        self.advance()
        self._log(f"{skipped.name} was skipped")

    def skip_all(self) -> None:
        self._require_no_wild_stack()
        for _ in range(len(self.players)):
            self.advance()
        self._log(f"Everyone was skipped, {self.get_curr_player().name} plays again")

    # --- card play ---

    def play_card(self, card: Card) -> None:
        """Move `card` from the current player's hand onto the discard pile."""
        self._require_no_wild_stack()
        player = self.get_curr_player()
        if not player.holds(card):
            raise InvalidMoveError(f"Card {card.face(self.side)} not in {player.name}'s hand")
        if not self.is_playable(card):
            raise InvalidMoveError(
                f"Card {card.face(self.side)} cannot be played on {self.top_card.face(self.side)}"
            )
        player.remove_card(card)
        self.top_card = card
        self.discard_pile.append(card)
        self.active_wild_color = None
        self._log(f"{player.name} played {card.face(self.side)}")

    def apply_effect(self, card: Card, color: Optional[AnyColor] = None) -> bool:
        """Resolve `card`'s special effect. Returns True if the turn already moved."""
        return rules.apply_effect(self, card, color)

    def play(self, card: Card, color: Optional[AnyColor] = None) -> bool:
        """Play a card and resolve its effect.

        A card that empties the hand ends the round and its effect is not applied.
        Returns True if the turn already moved.
        """
        self.play_card(card)
        if self.is_deck_empty():
            self._log(f"{self.get_curr_player().name} has no cards left")
            return False
        return self.apply_effect(card, color)

    def draw_card(self) -> Card:
        """Current player draws one card. Does not pass the turn."""
        self._require_no_wild_stack()
        player = self.get_curr_player()
        card = self.card_source.draw()
        player.add_card(card)
        self._log(f"{player.name} drew a card")
        return card

    def _give_next(self, count: int) -> List[Card]:
        self._require_no_wild_stack()
        target = self.get_next_player()
        drawn = [self.card_source.draw() for _ in range(count)]
        for card in drawn:
            target.add_card(card)
        self._log(f"{target.name} drew {count} card{'s' if count != 1 else ''} (penalty)")
        return drawn

    def draw_one(self) -> List[Card]:
        return self._give_next(1)

    def draw_five(self) -> List[Card]:
        """Next player draws five. The skip that goes with it is left to the caller."""
        return self._give_next(5)

    def wild(self, color: AnyColor) -> None:
        self._require_no_wild_stack()
        if not isinstance(color, (Color, DarkColor)) or color_side(color) is not self.side:
            raise InvalidMoveError(f"{color!r} is not a {self.side.value} side color")
        self.active_wild_color = color
        self._log(f"{self.get_curr_player().name} chose {color.name}")

    def wild_draw_two(self, color: AnyColor) -> List[Card]:
        """Declare a color, make the next player draw two, then skip them."""
        self._require_no_wild_stack()
        self.wild(color)
        drawn = self._give_next(2)
        self.skip()
        return drawn

    def flip(self) -> None:
        self._require_no_wild_stack()
        self.side = self.side.flipped()
        self.active_wild_color = None
        self._log(f"Deck flipped to the {self.side.value} side")

    # --- wild stack ---

    def set_init_wild_stack(self, color: DarkColor) -> None:
        if not isinstance(color, DarkColor):
            raise InvalidMoveError(f"Wild stack needs a dark side color, got {color!r}")
        self._require_no_wild_stack()
        self.active_wild_color = color
        self.wild_stack_state = WildStackState(
            active=True, target_color=color, drawer_index=self._next_index()
        )
        drawer = self.players[self.wild_stack_state.drawer_index]
        self._log(f"{drawer.name} must draw until {color.name}")

    def wild_stack(self) -> bool:
        """Draw one card for the forced drawer.

        Returns True once the drawn card shows the target color; the drawer then
        loses their turn. Every drawn card is kept.
        """
        stack = self.wild_stack_state
        if not stack.active:
            raise InvalidMoveError("No wild stack in progress")
        drawer = self.players[stack.drawer_index]
        card = self.card_source.draw()
        drawer.add_card(card)
        if card.dark_color != stack.target_color:
            log.debug("%s drew %s, still looking for %s", drawer.name, card.dark, stack.target_color)
            return False
        self.wild_stack_state = WildStackState()
        self._log(f"{drawer.name} found {stack.target_color.name}")
        self.skip()
        return True

    # --- scoring ---

    def get_score(self, winner: Player) -> int:
        """Points in every other player's hand, under the active side's table.

        Once the winner's hand is empty the points are credited to their match
        total, at most once per round.
        """
        score = sum(
            hand_points(p.hand, self.side) for p in self.players if p is not winner
        )
        if winner.has_no_cards() and self._scored_round != self.round_number:
            winner.score += score
            self._scored_round = self.round_number
            log.info("%s scores %d (total %d)", winner.name, score, winner.score)
        return score

    def check_winner(self, player: Player) -> bool:
        return player.score >= self.winning_score

    # --- AI ---

    def choose_ai_card_for_curr_player(self) -> Optional[Card]:
        return ai.choose_card(self.get_playable_cards(self.get_curr_player()), self.side)

    def choose_ai_color_for_curr_player(self) -> AnyColor:
        return ai.choose_color(self.get_curr_player().hand, self.side)

    # --- helpers ---

    def _require_players(self) -> None:
        if not self.players:
            raise InvalidConfigurationError("No players at the table")

    def _require_no_wild_stack(self) -> None:
        if self.wild_stack_state.active:
            raise InvalidMoveError("A wild stack is in progress; the drawer must keep drawing")

    def _next_index(self) -> int:
        self._require_players()
        return (self.current_index + self.direction) % len(self.players)

    def _log(self, event: str) -> None:
        self.history.append(event)
        log.debug(event)


@dataclass
class PlayerView:
    """Filtered game state visible to a single player.

    Contains only that player's hand and public info.
    """

    my_hand: List[Card]
    top_card: Optional[Card]
    side: Side
    effective_color: Optional[AnyColor]
    current_player: str
    direction: int
    wild_stack_active: bool
    player_order: tuple[str, ...]
    num_cards_per_player: Dict[str, int]
    scores: Dict[str, int]
    history: List[str] = field(default_factory=list)  # Recent game events

    @classmethod
    def from_state(cls, state: GameState, player: Player) -> "PlayerView":
        """Create a player view from full game state, hiding other players' hands."""
        return cls(
            my_hand=list(player.hand),
            top_card=state.top_card,
            side=state.side,
            effective_color=state.get_effective_color(),
            current_player=state.get_curr_player().name,
            direction=state.direction,
            wild_stack_active=state.is_wild_stack_card(),
            player_order=tuple(p.name for p in state.players),
            num_cards_per_player={p.name: len(p) for p in state.players},
            scores={p.name: p.score for p in state.players},
            history=list(state.history[-10:]),  # Last 10 events
        )

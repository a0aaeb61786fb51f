"""UNO Flip rules: card legality and the special-card effect table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

from unoflip.engine.card import AnyColor, AnyValue, Card, DarkValue, Side, Value
from unoflip.engine.errors import InvalidMoveError

if TYPE_CHECKING:
    from unoflip.engine.game_state import GameState


def effective_color(state: GameState) -> Optional[AnyColor]:
    """Color that must be matched (declared wild color, else the top card's)."""
    if state.active_wild_color is not None:
        return state.active_wild_color
    top = state.top_card
    if top is None:
        return None
    return top.face(state.side).color


def card_matches(card: Card, state: GameState) -> bool:
    """Check if a card can be played on the current top card."""
    top = state.top_card
    if top is None:
        return True
    side = state.side
    # Wild can always be played
    if card.is_wild(side):
        return True
    face = card.face(side)
    target = effective_color(state)
    # Match by color; a missing color never matches
    if face.color is not None and face.color == target:
        return True
    # Match by value
    return face.value == top.face(side).value


# Handlers return True when they already moved the turn pointer.
Effect = Callable[["GameState", Optional[AnyColor]], bool]


def _require_color(color: Optional[AnyColor]) -> AnyColor:
    if color is None:
        raise InvalidMoveError("Wild card requires a chosen color")
    return color


def _draw_one(state: GameState, color: Optional[AnyColor]) -> bool:
    state.draw_one()
    return False


def _reverse(state: GameState, color: Optional[AnyColor]) -> bool:
    state.reverse()
    # Heads-up, a reverse hands the turn straight back
    if len(state.players) == 2:
        state.skip()
        return True
    return False


def _skip(state: GameState, color: Optional[AnyColor]) -> bool:
    state.skip()
    return True


def _wild(state: GameState, color: Optional[AnyColor]) -> bool:
    state.wild(_require_color(color))
    return False


def _wild_draw_two(state: GameState, color: Optional[AnyColor]) -> bool:
    state.wild_draw_two(_require_color(color))
    return True


def _flip(state: GameState, color: Optional[AnyColor]) -> bool:
    state.flip()
    return False


def _draw_five(state: GameState, color: Optional[AnyColor]) -> bool:
    state.draw_five()
    state.skip()
    return True


def _skip_all(state: GameState, color: Optional[AnyColor]) -> bool:
    state.skip_all()
    return True


def _wild_stack(state: GameState, color: Optional[AnyColor]) -> bool:
    # The turn moves when the stack resolves
    state.set_init_wild_stack(_require_color(color))
    return True


EFFECTS: Dict[Tuple[Side, AnyValue], Effect] = {
    (Side.LIGHT, Value.DRAW_ONE): _draw_one,
    (Side.LIGHT, Value.REVERSE): _reverse,
    (Side.LIGHT, Value.SKIP): _skip,
    (Side.LIGHT, Value.WILD): _wild,
    (Side.LIGHT, Value.WILD_DRAW_TWO): _wild_draw_two,
    (Side.LIGHT, Value.FLIP): _flip,
    (Side.DARK, DarkValue.DRAW_FIVE): _draw_five,
    (Side.DARK, DarkValue.REVERSE): _reverse,
    (Side.DARK, DarkValue.SKIP_ALL): _skip_all,
    (Side.DARK, DarkValue.FLIP): _flip,
    (Side.DARK, DarkValue.WILD): _wild,
    (Side.DARK, DarkValue.WILD_STACK): _wild_stack,
}


def apply_effect(state: GameState, card: Card, color: Optional[AnyColor] = None) -> bool:
    """Resolve the special effect of `card` under the active side.

    Returns True if the effect already moved the turn, so the caller must not advance.
    Number cards have no entry and resolve to False.
    """
    effect = EFFECTS.get((state.side, card.face(state.side).value))
    if effect is None:
        return False
    return effect(state, color)

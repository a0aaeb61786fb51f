"""Game engine for UNO Flip."""

from unoflip.engine.card import Card, Color, DarkColor, DarkValue, Face, Side, Value
from unoflip.engine.deck import CardSource, RandomCardSource, ScriptedCardSource
from unoflip.engine.errors import InvalidConfigurationError, InvalidMoveError, UnoFlipError
from unoflip.engine.game_state import GameState, PlayerView, WildStackState
from unoflip.engine.player import Player
from unoflip.engine.rules import EFFECTS, apply_effect, card_matches
from unoflip.engine.scoring import card_points, hand_points

__all__ = [
    "Card",
    "Color",
    "DarkColor",
    "DarkValue",
    "Face",
    "Side",
    "Value",
    "CardSource",
    "RandomCardSource",
    "ScriptedCardSource",
    "InvalidConfigurationError",
    "InvalidMoveError",
    "UnoFlipError",
    "GameState",
    "PlayerView",
    "WildStackState",
    "Player",
    "EFFECTS",
    "apply_effect",
    "card_matches",
    "card_points",
    "hand_points",
]

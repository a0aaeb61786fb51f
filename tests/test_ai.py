"""Tests for the automated player heuristic."""

from unoflip.agents import HeuristicAgent
from unoflip.engine import (
    Card,
    Color,
    DarkColor,
    DarkValue,
    GameState,
    Player,
    PlayerView,
    Side,
    Value,
)
from unoflip.engine.card import SIDE_COLORS


def _ai_table() -> GameState:
    state = GameState()
    state.add_player("AI", True)
    state.add_player("Human", False)
    state.set_top_card(Card(Color.RED, Value.THREE, DarkColor.ORANGE, DarkValue.ONE))
    return state


def test_ai_flag() -> None:
    human = Player("Alice", False)
    bot = Player("Bot", True)
    assert not human.is_ai
    assert bot.is_ai
    assert bot.name == "Bot"


def test_chooses_playable_card() -> None:
    state = _ai_table()
    ai_player = state.get_curr_player()
    red_five = Card(Color.RED, Value.FIVE, DarkColor.PINK, DarkValue.FIVE)
    yellow_three = Card(Color.YELLOW, Value.THREE, DarkColor.PURPLE, DarkValue.THREE)
    green_two = Card(Color.GREEN, Value.TWO, DarkColor.TEAL, DarkValue.TWO)
    for card in (red_five, yellow_three, green_two):
        ai_player.add_card(card)

    playable = state.get_playable_cards(ai_player)
    chosen = state.choose_ai_card_for_curr_player()
    assert chosen is not None
    assert chosen in playable
    assert chosen is not green_two


def test_prefers_action_card() -> None:
    state = _ai_table()
    ai_player = state.get_curr_player()
    ai_player.add_card(Card(Color.RED, Value.FIVE, DarkColor.PINK, DarkValue.FIVE))
    ai_player.add_card(Card(Color.RED, Value.DRAW_ONE, DarkColor.PURPLE, DarkValue.DRAW_FIVE))
    chosen = state.choose_ai_card_for_curr_player()
    assert chosen is not None
    assert chosen.light_value == Value.DRAW_ONE


def test_prefers_action_card_on_dark_side() -> None:
    state = _ai_table()
    state.flip()
    ai_player = state.get_curr_player()
    ai_player.add_card(Card(Color.RED, Value.SKIP, DarkColor.ORANGE, DarkValue.FIVE))
    ai_player.add_card(Card(Color.BLUE, Value.ONE, DarkColor.ORANGE, DarkValue.SKIP_ALL))
    chosen = state.choose_ai_card_for_curr_player()
    assert chosen is not None
    assert chosen.dark_value == DarkValue.SKIP_ALL


def test_no_playable_card() -> None:
    state = _ai_table()
    ai_player = state.get_curr_player()
    ai_player.add_card(Card(Color.GREEN, Value.ONE, DarkColor.TEAL, DarkValue.ONE))
    ai_player.add_card(Card(Color.BLUE, Value.TWO, DarkColor.PINK, DarkValue.TWO))
    assert not state.curr_player_has_playable_card()
    assert state.choose_ai_card_for_curr_player() is None


def test_chooses_most_held_color() -> None:
    state = _ai_table()
    ai_player = state.get_curr_player()
    ai_player.add_card(Card(None, Value.WILD, DarkColor.TEAL, DarkValue.ONE))
    ai_player.add_card(Card(Color.BLUE, Value.TWO, DarkColor.TEAL, DarkValue.TWO))
    ai_player.add_card(Card(Color.BLUE, Value.SIX, DarkColor.PINK, DarkValue.TWO))
    ai_player.add_card(Card(Color.GREEN, Value.ONE, DarkColor.TEAL, DarkValue.ONE))
    assert state.choose_ai_color_for_curr_player() == Color.BLUE
    state.flip()
    assert state.choose_ai_color_for_curr_player() == DarkColor.TEAL


def test_color_choice_with_only_wilds() -> None:
    state = _ai_table()
    state.get_curr_player().add_card(Card(None, Value.WILD, None, DarkValue.WILD))
    assert state.choose_ai_color_for_curr_player() == Color.RED


def test_heuristic_agent_matches_engine() -> None:
    state = _ai_table()
    ai_player = state.get_curr_player()
    ai_player.add_card(Card(Color.RED, Value.FIVE, DarkColor.PINK, DarkValue.FIVE))
    ai_player.add_card(Card(Color.RED, Value.SKIP, DarkColor.PINK, DarkValue.FIVE))
    agent = HeuristicAgent("AI")
    view = PlayerView.from_state(state, ai_player)
    playable = state.get_playable_cards(ai_player)
    assert agent.choose_card(view, playable) is state.choose_ai_card_for_curr_player()
    assert agent.choose_color(view, SIDE_COLORS[Side.LIGHT]) == Color.RED

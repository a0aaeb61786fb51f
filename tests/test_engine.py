"""Unit tests for the game engine: dealing, turn order, legality and light-side effects."""

import pytest
from unoflip.engine import (
    Card,
    Color,
    DarkColor,
    DarkValue,
    GameState,
    InvalidConfigurationError,
    InvalidMoveError,
    RandomCardSource,
    ScriptedCardSource,
    Side,
    Value,
)


def _card(color, value, dark_color=DarkColor.ORANGE, dark_value=DarkValue.ONE) -> Card:
    return Card(color, value, dark_color, dark_value)


def _table(*names, source=None, **kwargs) -> GameState:
    state = GameState(card_source=source if source is not None else RandomCardSource(seed=7), **kwargs)
    for name in names:
        state.add_player(name)
    return state


def test_random_card_source_faces_are_valid() -> None:
    source = RandomCardSource(seed=42)
    for _ in range(200):
        card = source.draw()
        assert card.light_value is not None
        assert card.dark_value is not None
        if not card.is_wild(Side.LIGHT):
            assert card.light_color is not None
        if not card.is_wild(Side.DARK):
            assert card.dark_color is not None


def test_random_card_source_reproducible() -> None:
    a = RandomCardSource(seed=123)
    b = RandomCardSource(seed=123)
    assert [str(a.draw()) for _ in range(20)] == [str(b.draw()) for _ in range(20)]


def test_cards_compare_by_identity() -> None:
    c1 = _card(Color.RED, Value.FIVE)
    c2 = _card(Color.RED, Value.FIVE)
    assert c1 != c2
    assert c1 == c1


def test_non_wild_face_needs_color() -> None:
    with pytest.raises(ValueError):
        Card(None, Value.FIVE, DarkColor.PINK, DarkValue.ONE)


def test_new_round_deals_seven_cards() -> None:
    state = _table("A", "B", "C")
    state.new_round()
    for player in state.players:
        assert len(player.hand) == 7
    assert state.get_curr_player().name == "A"
    top = state.get_top_card()
    assert top is not None
    assert not top.is_wild(Side.LIGHT)
    assert not top.is_wild(Side.DARK)
    assert state.discard_pile == [top]


def test_new_round_redraws_wild_top_card() -> None:
    deal = [_card(Color.RED, Value.ONE) for _ in range(14)]
    light_wild = _card(None, Value.WILD)
    dark_wild = _card(Color.BLUE, Value.TWO, None, DarkValue.WILD_STACK)
    plain = _card(Color.GREEN, Value.SIX)
    state = _table("A", "B", source=ScriptedCardSource(deal + [light_wild, dark_wild, plain]))
    state.new_round()
    assert state.get_top_card() is plain


def test_new_round_requires_two_players() -> None:
    state = _table("A")
    with pytest.raises(InvalidConfigurationError):
        state.new_round()


def test_duplicate_player_name_rejected() -> None:
    state = _table("A")
    with pytest.raises(InvalidConfigurationError):
        state.add_player("A")


def test_turn_queries_need_players() -> None:
    state = GameState()
    with pytest.raises(InvalidConfigurationError):
        state.get_curr_player()


def test_draw_card_adds_one() -> None:
    state = _table("John", "Mark")
    state.new_round()
    before = len(state.get_curr_player().hand)
    state.draw_card()
    assert len(state.get_curr_player().hand) == before + 1
    assert state.get_curr_player().name == "John"


def test_draw_one_hits_next_player() -> None:
    state = _table("John", "Mark")
    state.new_round()
    drawn = state.draw_one()
    assert len(drawn) == 1
    state.advance()
    assert len(state.get_curr_player().hand) == 8


def test_skip_after_reverse() -> None:
    normal = _table("A", "B", "C")
    normal.new_round()
    normal.skip()
    assert normal.get_curr_player().name == "C"

    reversed_game = _table("A", "B", "C")
    reversed_game.new_round()
    reversed_game.reverse()
    reversed_game.skip()
    assert reversed_game.get_curr_player().name == "B"


def test_next_player_follows_direction() -> None:
    state = _table("A", "B", "C")
    state.new_round()
    assert state.get_next_player().name == "B"
    state.reverse()
    assert state.get_next_player().name == "C"
    state.advance()
    assert state.get_next_player().name == "B"


def test_advance_moves_to_new_player() -> None:
    state = _table("John", "Mark", "Max")
    state.new_round()
    first = state.get_curr_player()
    state.advance()
    assert state.get_curr_player() is not first


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
def test_double_reverse_restores_direction(n: int) -> None:
    state = _table(*[f"p{i}" for i in range(n)])
    state.reverse()
    state.reverse()
    assert state.direction == 1
    state.advance()
    state.reverse()
    state.advance()
    assert state.get_curr_player().name == "p0"


def test_wild_sets_color() -> None:
    state = _table("John", "Mark")
    state.new_round()
    state.wild(Color.RED)
    assert state.get_effective_color() == Color.RED


def test_wild_rejects_other_side_color() -> None:
    state = _table("John", "Mark")
    state.new_round()
    with pytest.raises(InvalidMoveError):
        state.wild(DarkColor.PINK)


def test_wild_draw_two() -> None:
    state = _table("John", "Mark")
    state.new_round()
    mark_start = len(state.players[1].hand)
    drawn = state.wild_draw_two(Color.GREEN)
    assert len(drawn) == 2
    assert state.get_effective_color() == Color.GREEN
    # Two players: the skip comes back round to John
    assert state.get_curr_player().name == "John"
    state.advance()
    assert len(state.get_curr_player().hand) == mark_start + 2


def test_playable_card() -> None:
    state = _table("John", "Mark")
    state.set_top_card(_card(Color.RED, Value.THREE))
    assert state.is_playable(_card(Color.RED, Value.FIVE))
    assert state.is_playable(_card(Color.BLUE, Value.THREE))
    assert state.is_playable(_card(None, Value.WILD))
    assert state.is_playable(_card(Color.YELLOW, Value.WILD_DRAW_TWO))
    assert not state.is_playable(_card(Color.GREEN, Value.ONE))


def test_uncolored_top_matches_nothing_until_color_declared() -> None:
    state = _table("John", "Mark")
    state.set_top_card(_card(None, Value.WILD))
    green_one = _card(Color.GREEN, Value.ONE)
    assert not state.is_playable(green_one)
    state.wild(Color.GREEN)
    assert state.is_playable(green_one)


def test_playable_cards_filters_hand() -> None:
    state = _table("John", "Mark")
    john = state.players[0]
    state.set_top_card(_card(Color.RED, Value.THREE))
    red_five = _card(Color.RED, Value.FIVE)
    green_two = _card(Color.GREEN, Value.TWO)
    john.add_card(red_five)
    john.add_card(green_two)
    assert state.get_playable_cards(john) == [red_five]
    assert state.curr_player_has_playable_card()


def test_play_card_updates_top() -> None:
    state = _table("John", "Mark")
    john = state.players[0]
    state.set_top_card(_card(Color.RED, Value.THREE))
    card = _card(Color.RED, Value.FIVE)
    john.add_card(card)
    john.add_card(_card(Color.BLUE, Value.ONE))
    state.play_card(card)
    assert len(john.hand) == 1
    assert state.get_top_card() is card
    assert state.discard_pile[-1] is card


def test_play_card_not_in_hand() -> None:
    state = _table("John", "Mark")
    state.set_top_card(_card(Color.RED, Value.THREE))
    with pytest.raises(InvalidMoveError):
        state.play_card(_card(Color.RED, Value.FIVE))


def test_play_card_not_playable() -> None:
    state = _table("John", "Mark")
    john = state.players[0]
    state.set_top_card(_card(Color.RED, Value.THREE))
    card = _card(Color.GREEN, Value.FIVE)
    john.add_card(card)
    with pytest.raises(InvalidMoveError):
        state.play_card(card)
    assert john.hand == (card,)


def test_play_card_clears_declared_color() -> None:
    state = _table("John", "Mark")
    john = state.players[0]
    state.set_top_card(_card(None, Value.WILD))
    state.wild(Color.BLUE)
    card = _card(Color.BLUE, Value.SEVEN)
    john.add_card(card)
    john.add_card(_card(Color.RED, Value.ONE))
    state.play_card(card)
    assert state.active_wild_color is None
    assert state.get_effective_color() == Color.BLUE


def test_play_skip_moves_turn() -> None:
    state = _table("A", "B", "C")
    a = state.players[0]
    state.set_top_card(_card(Color.RED, Value.THREE))
    skip = _card(Color.RED, Value.SKIP)
    a.add_card(skip)
    a.add_card(_card(Color.BLUE, Value.ONE))
    assert state.play(skip) is True
    assert state.get_curr_player().name == "C"


def test_play_number_leaves_turn_to_caller() -> None:
    state = _table("A", "B", "C")
    a = state.players[0]
    state.set_top_card(_card(Color.RED, Value.THREE))
    five = _card(Color.RED, Value.FIVE)
    a.add_card(five)
    a.add_card(_card(Color.BLUE, Value.ONE))
    assert state.play(five) is False
    assert state.get_curr_player().name == "A"


def test_play_wild_without_color_rejected() -> None:
    state = _table("A", "B")
    a = state.players[0]
    state.set_top_card(_card(Color.RED, Value.THREE))
    wild = _card(None, Value.WILD)
    a.add_card(wild)
    a.add_card(_card(Color.BLUE, Value.ONE))
    with pytest.raises(InvalidMoveError):
        state.play(wild)


def test_reverse_with_two_players_acts_as_skip() -> None:
    state = _table("A", "B")
    a = state.players[0]
    state.set_top_card(_card(Color.RED, Value.THREE))
    for _ in range(2):
        rev = _card(Color.RED, Value.REVERSE)
        a.add_card(rev)
        a.add_card(_card(Color.BLUE, Value.ONE))
        assert state.play(rev) is True
        assert state.get_curr_player().name == "A"


def test_draw_one_card_effect() -> None:
    state = _table("A", "B", "C")
    a, b = state.players[0], state.players[1]
    state.set_top_card(_card(Color.RED, Value.THREE))
    card = _card(Color.RED, Value.DRAW_ONE)
    a.add_card(card)
    a.add_card(_card(Color.BLUE, Value.ONE))
    assert state.play(card) is False
    assert len(b.hand) == 1
    assert state.get_curr_player() is a


def test_last_card_ends_round_without_effect() -> None:
    state = _table("A", "B", "C")
    a, b = state.players[0], state.players[1]
    state.set_top_card(_card(Color.RED, Value.THREE))
    card = _card(Color.RED, Value.DRAW_ONE)
    a.add_card(card)
    assert state.play(card) is False
    assert state.is_deck_empty()
    assert len(b.hand) == 0


def test_is_deck_empty() -> None:
    state = _table("John", "Mark")
    state.new_round()
    assert not state.is_deck_empty()
    state.get_curr_player().clear_hand()
    assert state.is_deck_empty()
    state.draw_card()
    assert not state.is_deck_empty()


def test_set_top_card() -> None:
    state = _table("John", "Mark")
    state.new_round()
    chosen = _card(Color.BLUE, Value.THREE)
    state.set_top_card(chosen)
    assert state.get_top_card() is chosen


def test_hand_is_a_snapshot() -> None:
    state = _table("John", "Mark")
    state.new_round()
    hand = state.players[0].hand
    assert isinstance(hand, tuple)
    state.draw_card()
    assert len(hand) == 7

"""Human agent - reads choices from terminal."""

from typing import Optional, Sequence

from unoflip.engine import Card, PlayerView
from unoflip.engine.card import AnyColor


def _prompt_index(count: int) -> int:
    while True:
        try:
            raw = input("Enter number: ").strip()
            idx = int(raw)
            if 0 <= idx < count:
                return idx
        except ValueError:
            pass
        print("Invalid. Try again.")


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def choose_card(self, player_view: PlayerView, playable: Sequence[Card]) -> Optional[Card]:
        side = player_view.side
        print(f"\n--- {self._name}'s turn ({side.value} side) ---")
        print("Your hand:", " ".join(str(c.face(side)) for c in player_view.my_hand))
        top = player_view.top_card.face(side) if player_view.top_card else "None"
        print("Top card:", top)
        if player_view.effective_color is not None:
            print("Color to match:", player_view.effective_color.name)
        print("\nOptions:")
        print("  0: DRAW")
        for i, card in enumerate(playable, start=1):
            print(f"  {i}: PLAY {card.face(side)}")

        idx = _prompt_index(len(playable) + 1)
        return None if idx == 0 else playable[idx - 1]

    def choose_color(self, player_view: PlayerView, options: Sequence[AnyColor]) -> AnyColor:
        print("\nChoose a color:")
        for i, color in enumerate(options):
            print(f"  {i}: {color.name}")
        return options[_prompt_index(len(options))]

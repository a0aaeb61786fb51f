"""Simulate a match with random agents and print the event log."""

import random

from unoflip.engine import PlayerView
from unoflip.orchestration.game_runner import GameRunner
from unoflip.config import GameConfig


class RandomAgent:
    def __init__(self, name):
        self.name = name

    def choose_card(self, view: PlayerView, playable):
        return random.choice(playable) if playable else None

    def choose_color(self, view: PlayerView, options):
        return random.choice(options)


def main():
    names = ["p1", "p2", "p3", "p4"]
    agents = {name: RandomAgent(f"Bot-{name}") for name in names}

    runner = GameRunner.from_config(
        [(name, True) for name in names],
        config=GameConfig(seed=42),
        agents=agents,
    )
    result = runner.run()

    for event in runner.state.history:
        print(f"> {event}")

    print(f"Match finished! Winner: {result.winner}")
    print(f"Rounds: {len(result.rounds)}")
    print(f"Scores: {result.scores}")


if __name__ == "__main__":
    main()

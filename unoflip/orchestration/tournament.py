"""Tournament - run many matches and aggregate results."""

import random
from collections import defaultdict
from typing import Any, Dict, Optional, Sequence, Tuple

from unoflip.config import GameConfig
from unoflip.orchestration.game_runner import GameRunner


def run_tournament(
    players: Sequence[Tuple[str, bool]],
    num_matches: int = 10,
    seed: Optional[int] = None,
    agents: Optional[Dict[str, Any]] = None,
    config: Optional[GameConfig] = None,
) -> Dict[str, int]:
    """Run `num_matches` full matches between the same players.

    Seating alternates between the given order and its reverse so nobody
    always leads.

    Returns:
        Dict mapping player name to number of matches won.
    """
    config = config or GameConfig()
    wins: Dict[str, int] = defaultdict(int)

    rng = random.Random(seed)
    for m in range(num_matches):
        order = list(players) if m % 2 == 0 else list(reversed(players))
        match_config = GameConfig(
            hand_size=config.hand_size,
            winning_score=config.winning_score,
            max_turns_per_round=config.max_turns_per_round,
            seed=rng.randint(0, 2**31 - 1),
        )
        result = GameRunner.from_config(order, config=match_config, agents=agents).run()
        if result.winner is not None:
            wins[result.winner] += 1

    return dict(wins)

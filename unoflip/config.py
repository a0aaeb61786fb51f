"""Match settings, read from the environment (and a .env file via the CLI)."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from unoflip.engine.errors import InvalidConfigurationError
from unoflip.engine.game_state import HAND_SIZE, WINNING_SCORE


@dataclass(frozen=True)
class GameConfig:
    """Core match configuration."""

    hand_size: int = HAND_SIZE
    winning_score: int = WINNING_SCORE
    max_turns_per_round: int = 1000
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.hand_size < 1:
            raise InvalidConfigurationError(f"hand_size must be positive, got {self.hand_size}")
        if self.winning_score < 1:
            raise InvalidConfigurationError(
                f"winning_score must be positive, got {self.winning_score}"
            )
        if self.max_turns_per_round < 1:
            raise InvalidConfigurationError(
                f"max_turns_per_round must be positive, got {self.max_turns_per_round}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """Build a config from UNOFLIP_* variables, defaulting anything unset."""
        env = os.environ if environ is None else environ
        seed = _int_var(env, "UNOFLIP_SEED")
        return cls(
            hand_size=_int_var(env, "UNOFLIP_HAND_SIZE", HAND_SIZE),
            winning_score=_int_var(env, "UNOFLIP_WINNING_SCORE", WINNING_SCORE),
            max_turns_per_round=_int_var(env, "UNOFLIP_MAX_TURNS", 1000),
            seed=seed,
        )


def _int_var(env: Mapping[str, str], name: str, default: Optional[int] = None) -> Optional[int]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfigurationError(f"{name} must be an integer, got {raw!r}") from None

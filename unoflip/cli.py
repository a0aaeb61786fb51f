"""CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO Flip with human, heuristic and LLM players")


def _parse_players(
    player_specs: str,
    llm_provider: str,
    llm_model: str,
) -> tuple[list[tuple[str, bool]], dict[str, "AgentProtocol"]]:
    """Parse `name[:kind]` entries; kind is human (default), ai, or llm[=model]."""
    from unoflip.agent.protocol import AgentProtocol
    from unoflip.agents.llm_agent import LLMAgent

    seats: list[tuple[str, bool]] = []
    agents: dict[str, AgentProtocol] = {}
    for part in (s.strip() for s in player_specs.split(",")):
        if not part:
            continue
        name, _, kind = part.partition(":")
        kind = kind.lower() or "human"
        if kind == "human":
            seats.append((name, False))
        elif kind == "ai":
            seats.append((name, True))
        elif kind.startswith("llm"):
            _, _, model = kind.partition("=")
            seats.append((name, True))
            agents[name] = LLMAgent(provider=llm_provider, model=model or llm_model)
        else:
            raise typer.BadParameter(f"Unknown player type: {kind}. Use 'human', 'ai' or 'llm'.")
    return seats, agents


def _load_config(seed: Optional[int], winning_score: Optional[int]) -> "GameConfig":
    from unoflip.config import GameConfig
    from unoflip.engine import UnoFlipError

    try:
        config = GameConfig.from_env()
        return GameConfig(
            hand_size=config.hand_size,
            winning_score=winning_score if winning_score is not None else config.winning_score,
            max_turns_per_round=config.max_turns_per_round,
            seed=seed if seed is not None else config.seed,
        )
    except UnoFlipError as e:
        raise typer.BadParameter(str(e)) from e


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def play(
    players: str = typer.Option(
        "you,bot1:ai,bot2:ai",
        "--players",
        "-p",
        help="Comma-separated name[:type], type is human, ai or llm[=model] (e.g. me,bot:ai,gpt:llm=openai/gpt-4o)",
    ),
    llm_provider: str = typer.Option(
        "openrouter",
        "--llm-provider",
        help="LLM provider: openrouter, groq, ollama or huggingface",
    ),
    llm_model: str = typer.Option(
        "openai/gpt-4o-mini",
        "--llm-model",
        "-m",
        help="Default model for llm players",
    ),
    winning_score: Optional[int] = typer.Option(None, "--winning-score", "-w", help="Points to win the match"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Play a full UNO Flip match."""
    from unoflip.engine import UnoFlipError
    from unoflip.orchestration.game_runner import GameRunner

    _setup_logging(verbose)
    seats, agents = _parse_players(players, llm_provider, llm_model)
    config = _load_config(seed, winning_score)
    try:
        runner = GameRunner.from_config(seats, config=config, agents=agents)
        result = runner.run()
    except UnoFlipError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for i, rnd in enumerate(result.rounds, start=1):
        typer.echo(
            f"Round {i}: {rnd.winner or 'no winner'} +{rnd.points} "
            f"({rnd.num_turns} turns, {rnd.side.value} side)"
        )
    typer.echo(f"Winner: {result.winner if result.winner is not None else 'None'}")
    for name, score in sorted(result.scores.items(), key=lambda x: -x[1]):
        typer.echo(f"  {name}: {score}")


@app.command()
def simulate(
    num_players: int = typer.Option(4, "--players", "-n", help="Number of AI players"),
    matches: int = typer.Option(10, "--matches", "-g", help="Number of matches"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run a tournament between heuristic players."""
    from unoflip.engine import UnoFlipError
    from unoflip.orchestration.tournament import run_tournament

    _setup_logging(verbose)
    config = _load_config(seed, None)
    seats = [(f"bot{i}", True) for i in range(1, num_players + 1)]
    try:
        wins = run_tournament(seats, num_matches=matches, seed=config.seed, config=config)
    except UnoFlipError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Tournament results:")
    for name, _ in seats:
        typer.echo(f"  {name}: {wins.get(name, 0)} wins")


if __name__ == "__main__":
    app()

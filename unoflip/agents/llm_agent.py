"""LLM agent using OpenAI library with OpenRouter, Groq, Ollama or Hugging Face."""

import json
import logging
import os
import re
import time
from typing import Optional, Sequence

from openai import OpenAI

from unoflip.engine import Card, PlayerView, ai
from unoflip.engine.card import AnyColor

log = logging.getLogger(__name__)

OPENROUTER_BASE = "https://openrouter.ai/api/v1"
GROQ_BASE = "https://api.groq.com/openai/v1"
OLLAMA_BASE = "http://localhost:11434/v1"
HUGGINGFACE_BASE = "https://router.huggingface.co/v1"


def _format_player_view(pv: PlayerView, player_name: str) -> str:
    """Format player view as text for the LLM."""
    side = pv.side
    lines = [
        f"=== Active side: {side.value.upper()} ===",
        "",
        "=== Your hand ===",
        " ".join(str(c.face(side)) for c in pv.my_hand),
        "",
        "=== Top card on discard ===",
        str(pv.top_card.face(side)) if pv.top_card else "None",
        "",
        "=== Current color to match ===",
        pv.effective_color.name if pv.effective_color else "any",
    ]
    if pv.wild_stack_active:
        lines.append("(a wild stack is being drawn)")
    lines.extend(["", "=== Other players' card counts ==="])
    for name, count in pv.num_cards_per_player.items():
        if name != player_name:
            lines.append(f"  {name}: {count} cards")
    lines.extend(["", "=== Match scores ==="])
    lines.extend(f"  {name}: {pv.scores.get(name, 0)}" for name in pv.player_order)
    lines.extend([
        "",
        "=== Turn order ===",
        " -> ".join(pv.player_order),
        "",
        "=== Direction ===",
        "clockwise" if pv.direction == 1 else "counter-clockwise",
        "",
        "=== Game History (last 10 events) ===",
    ])
    if pv.history:
        lines.extend(f"- {h}" for h in pv.history)
    else:
        lines.append("No history yet.")
    return "\n".join(lines)


def _format_options(labels: Sequence[str]) -> str:
    return "\n".join(f"{i}: {label}" for i, label in enumerate(labels))


def _parse_index(response: str, count: int) -> Optional[int]:
    """Pull an in-range option index out of a model response."""
    # 1. A JSON object anywhere in the response
    json_match = re.search(r"(\{.*?\})", response, re.DOTALL)
    if json_match:
        json_str = json_match.group(1)
        for candidate in (json_str, json_str.replace("'", '"')):
            try:
                data = json.loads(candidate)
            except (json.JSONDecodeError, ValueError):
                continue
            if isinstance(data, dict) and isinstance(data.get("choice"), int):
                idx = data["choice"]
                if 0 <= idx < count:
                    return idx
                log.debug("Index %d out of range (0-%d)", idx, count - 1)
            break

    # 2. "choice": N with any quoting
    match = re.search(r"[\"']?choice[\"']?\s*:\s*(\d+)", response, re.IGNORECASE)
    if match:
        idx = int(match.group(1))
        if 0 <= idx < count:
            return idx

    # 3. Last resort: a standalone number
    cleaned = re.sub(r"[{}\[\]\"'.,:]", " ", response)
    for word in cleaned.split():
        if word.isdigit() and 0 <= int(word) < count:
            return int(word)
    return None


class LLMAgent:
    """Agent that asks an LLM to choose; falls back to the heuristic when it cannot."""

    def __init__(
        self,
        provider: str = "openrouter",
        model: str = "openai/gpt-4o-mini",
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        rate_limit: Optional[float] = None,
        client: Optional[OpenAI] = None,
    ):
        if client is None:
            if provider == "openrouter":
                base_url = OPENROUTER_BASE
                key = api_key or os.environ.get("OPENROUTER_API_KEY")
            elif provider == "groq":
                base_url = GROQ_BASE
                key = api_key or os.environ.get("GROQ_API_KEY")
            elif provider == "ollama":
                base_url = os.environ.get("OLLAMA_BASE_URL", OLLAMA_BASE)
                key = "ollama"
            elif provider == "huggingface":
                base_url = HUGGINGFACE_BASE
                key = api_key or os.environ.get("HUGGINGFACE_API_KEY")
            else:
                raise ValueError(f"Unknown provider: {provider}")

            if not key:
                raise ValueError(
                    f"API key required for {provider}. Set {provider.upper()}_API_KEY or pass api_key."
                )
            client = OpenAI(api_key=key, base_url=base_url)

        self._client = client
        self._model = model
        self._timeout = timeout
        self._provider = provider
        self._rate_limit = rate_limit  # Requests per minute
        self._request_history: list[float] = []

        log.info(
            "[%s] Initialized with provider=%s, timeout=%ss, rate_limit=%s rpm",
            self.name, provider, timeout, rate_limit or "None",
        )

    @property
    def name(self) -> str:
        return f"llm-{self._model}"

    def _wait_for_rate_limit(self) -> None:
        """Block if rate limit is exceeded."""
        if not self._rate_limit:
            return

        now = time.time()
        # Filter history to last 60 seconds
        self._request_history = [t for t in self._request_history if now - t < 60.0]

        if len(self._request_history) >= self._rate_limit:
            # Wait until the oldest request in the window expires
            wait_time = 60.0 - (now - self._request_history[0])
            if wait_time > 0:
                log.info("[%s] Rate limit reached. Waiting %.2fs...", self.name, wait_time)
                time.sleep(wait_time)

        self._request_history.append(time.time())

    def _ask(self, prompt: str, count: int) -> Optional[int]:
        """Send the prompt up to three times; return a parsed index or None."""
        for attempt in range(1, 4):
            start_time = time.time()
            try:
                self._wait_for_rate_limit()

                kwargs = {
                    "model": self._model,
                    "messages": [{"role": "user", "content": prompt}],
                    "timeout": self._timeout,
                }
                # Only pass response_format where JSON mode is known to work
                if "gpt-4" in self._model or "gpt-3.5" in self._model or "groq" in self._provider:
                    kwargs["response_format"] = {"type": "json_object"}

                resp = self._client.chat.completions.create(**kwargs)
                content = resp.choices[0].message.content or ""
                log.debug("[%s] Response in %.2fs: %s", self.name, time.time() - start_time, content)

                idx = _parse_index(content, count)
                if idx is not None:
                    return idx
                log.warning("[%s] Failed to parse a choice from response: %r", self.name, content)
            except Exception as e:
                log.warning(
                    "[%s] Error on attempt %d after %.2fs: %s: %s",
                    self.name, attempt, time.time() - start_time, type(e).__name__, e,
                )
        return None

    def choose_card(self, player_view: PlayerView, playable: Sequence[Card]) -> Optional[Card]:
        if not playable:
            return None

        side = player_view.side
        labels = ["DRAW"] + [f"PLAY {c.face(side)}" for c in playable]
        prompt = f"""You are playing UNO Flip.
Objective: empty your hand. Match the top card by color or value on the active side. Wild cards can be played on anything.

{_format_player_view(player_view, player_view.current_player)}

=== Options ===
{_format_options(labels)}

Respond with a JSON object containing the index of your chosen option.
Example: {{"choice": 1}}
"""
        idx = self._ask(prompt, len(labels))
        if idx is None:
            log.info("[%s] All retries failed. Falling back to heuristic.", self.name)
            return ai.choose_card(playable, side)
        return None if idx == 0 else playable[idx - 1]

    def choose_color(self, player_view: PlayerView, options: Sequence[AnyColor]) -> AnyColor:
        prompt = f"""You are playing UNO Flip and just played a wild card.

{_format_player_view(player_view, player_view.current_player)}

=== Colors ===
{_format_options([c.name for c in options])}

Respond with a JSON object containing the index of the color to declare.
Example: {{"choice": 0}}
"""
        idx = self._ask(prompt, len(options))
        if idx is None:
            color = ai.choose_color(player_view.my_hand, player_view.side)
            return color if color in options else options[0]
        return options[idx]

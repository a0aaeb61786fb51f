"""Built-in agents."""

from unoflip.agents.heuristic_agent import HeuristicAgent
from unoflip.agents.human_agent import HumanAgent
from unoflip.agents.llm_agent import LLMAgent

__all__ = ["HeuristicAgent", "HumanAgent", "LLMAgent"]

"""Intent agents for headless runs.

Re-exports the base class and all concrete agent implementations so
consumers can do::

    from ascension_army.sim.play_agents import IntentAgent, RandomAgent
"""

from .base import IntentAgent
from .random_agent import RandomAgent
from .scripted_agent import ScriptedAgent

__all__ = ["IntentAgent", "RandomAgent", "ScriptedAgent"]

"""Agent plugin base package.

Provides :class:`AbstractDevAgentPlugin`, the lifecycle-managing base class
concrete agents extend.
"""

from .abstract_dev_agent_plugin import AbstractDevAgentPlugin

__all__ = ["AbstractDevAgentPlugin"]

"""Tests for capability reporting and protocol conformance."""
from __future__ import annotations

import pytest

from dev_agent_plugin import AbstractDevAgentPlugin, AgentCapabilities, DevAgent
from dev_agent_plugin.mock import EchoDevAgent


def test_echo_capabilities_defaults(echo_agent: EchoDevAgent) -> None:
    caps = echo_agent.get_capabilities()

    assert caps == AgentCapabilities(streaming=True, cancellation=True, models=["echo-1"])
    assert caps.to_dict() == {"streaming": True, "cancellation": True, "models": ["echo-1"]}


def test_capabilities_reflect_configuration() -> None:
    agent = EchoDevAgent(models=["echo-small", "echo-large"], streaming=False)
    caps = agent.get_capabilities()

    assert caps.streaming is False
    assert caps.models == ["echo-small", "echo-large"]


def test_capabilities_are_stable_across_calls(echo_agent: EchoDevAgent) -> None:
    assert echo_agent.get_capabilities() == echo_agent.get_capabilities()


def test_capabilities_are_immutable(echo_agent: EchoDevAgent) -> None:
    caps = echo_agent.get_capabilities()
    with pytest.raises(AttributeError):
        caps.streaming = False  # type: ignore[misc]


def test_echo_agent_satisfies_protocol(echo_agent: EchoDevAgent) -> None:
    assert isinstance(echo_agent, DevAgent)
    assert isinstance(echo_agent, AbstractDevAgentPlugin)


def test_missing_capabilities_hook_raises() -> None:
    class _Bare(AbstractDevAgentPlugin):
        pass

    with pytest.raises(NotImplementedError):
        _Bare().get_capabilities()

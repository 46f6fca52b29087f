"""Tests for timeout configuration and plugin construction parameters."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from dev_agent_plugin import AgentPluginParams
from dev_agent_plugin.base.timeouts import (
    TimeoutConfig,
    get_timeout_config,
    is_valid_timeout_ms,
    resolve_timeout_ms,
)
from dev_agent_plugin.config.defaults import DEFAULT_INVOCATION_TIMEOUT_MS, DEFAULT_TIMEOUT_ENV
from dev_agent_plugin.mock import EchoDevAgent


def test_builtin_default_is_thirty_seconds():
    assert get_timeout_config() == TimeoutConfig(default_timeout_ms=30_000)
    assert DEFAULT_INVOCATION_TIMEOUT_MS == 30_000


def test_env_override_is_picked_up(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(DEFAULT_TIMEOUT_ENV, "1234")
    assert get_timeout_config().default_timeout_ms == 1234

    monkeypatch.setenv(DEFAULT_TIMEOUT_ENV, "4321")
    assert get_timeout_config().default_timeout_ms == 4321


@pytest.mark.parametrize("raw", ["abc", "-5", "0", " "])
def test_invalid_env_values_fall_back(monkeypatch: pytest.MonkeyPatch, raw: str):
    monkeypatch.setenv(DEFAULT_TIMEOUT_ENV, raw)
    assert get_timeout_config().default_timeout_ms == DEFAULT_INVOCATION_TIMEOUT_MS


@pytest.mark.parametrize(
    "value, expected",
    [(1, True), (30_000, True), (0, False), (-1, False), (True, False), (1.0, False), ("10", False), (None, False)],
)
def test_is_valid_timeout_ms(value, expected):
    assert is_valid_timeout_ms(value) is expected


def test_resolve_timeout_precedence(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(DEFAULT_TIMEOUT_ENV, "777")
    assert resolve_timeout_ms(50, 100) == 50
    assert resolve_timeout_ms(None, 100) == 100
    assert resolve_timeout_ms(None, None) == 777


def test_agent_uses_env_default_when_unconfigured(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(DEFAULT_TIMEOUT_ENV, "1234")
    agent = EchoDevAgent()

    agent.invoke("hi")

    assert agent.default_timeout_ms == 1234
    assert agent.recorded_options[0].signal.timeout_ms == 1234


def test_constructor_timeout_beats_params():
    params = AgentPluginParams(agent_name="echo", default_timeout_ms=75)

    assert EchoDevAgent(params).default_timeout_ms == 75
    assert EchoDevAgent(params, default_timeout_ms=20).default_timeout_ms == 20


@pytest.mark.parametrize("bad", [0, -10, True])
def test_constructor_rejects_invalid_timeout(bad):
    with pytest.raises(ValueError):
        EchoDevAgent(default_timeout_ms=bad)


def test_params_validation():
    with pytest.raises(ValidationError):
        AgentPluginParams(default_timeout_ms=0)
    params = AgentPluginParams(agent_name="custom", extra={"region": "eu"})
    assert params.default_timeout_ms is None
    assert params.model_dump()["extra"] == {"region": "eu"}


@pytest.mark.parametrize("bad", [True, False, "10", 1.5, -1])
def test_params_timeout_is_strict_like_per_call_check(bad):
    with pytest.raises(ValidationError):
        AgentPluginParams(default_timeout_ms=bad)
    assert not is_valid_timeout_ms(bad)


def test_agent_name_comes_from_params():
    assert EchoDevAgent().agent_name == "echo"
    assert EchoDevAgent(AgentPluginParams(agent_name="reviewer")).agent_name == "reviewer"

"""Pytest configuration for the plugin test suite.

Provides echo agent fixtures and keeps environment-driven configuration from
leaking between tests.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from dev_agent_plugin.base.logging import LOG_LEVEL_ENV
from dev_agent_plugin.config.defaults import DEFAULT_TIMEOUT_ENV
from dev_agent_plugin.mock import EchoDevAgent


@pytest.fixture(autouse=True)
def clear_timeout_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test against the built-in timeout and log level defaults."""

    monkeypatch.delenv(DEFAULT_TIMEOUT_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    yield


@pytest.fixture()
def echo_agent() -> EchoDevAgent:
    """Return a fresh echo agent with no artificial latency."""

    return EchoDevAgent()


@pytest.fixture()
def slow_agent() -> EchoDevAgent:
    """Echo agent whose single-shot call takes 500ms unless interrupted."""

    return EchoDevAgent(invoke_delay_ms=500)



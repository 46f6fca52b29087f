"""Invocation timeout configuration.

Centralizes the default invocation timeout so no agent hard-codes its own.

get_timeout_config()
    Returns a process-cached :class:`TimeoutConfig`, parsing the environment
    on first use and again only when the relevant variable changes (tests
    adjust it at runtime via ``monkeypatch``). Supported variable:
        DEV_AGENT_DEFAULT_TIMEOUT_MS

resolve_timeout_ms(per_call, configured)
    Applies the precedence rule: per-call override, then the plugin's
    configured default, then the environment/built-in default.
"""
from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional

from ..config.defaults import DEFAULT_INVOCATION_TIMEOUT_MS, DEFAULT_TIMEOUT_ENV


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (milliseconds)."""

    default_timeout_ms: int = DEFAULT_INVOCATION_TIMEOUT_MS


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_int(name: str, default: int) -> int:
    """Parse a positive integer environment variable, else ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = int(raw.strip())
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    cur_guard = os.getenv(DEFAULT_TIMEOUT_ENV, "")
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        default_timeout_ms=_parse_env_int(DEFAULT_TIMEOUT_ENV, DEFAULT_INVOCATION_TIMEOUT_MS),
    )
    _ENV_GUARD = cur_guard
    return _CACHED


def is_valid_timeout_ms(value: object) -> bool:
    """Whether ``value`` is a positive integer (``bool`` excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def resolve_timeout_ms(per_call: Optional[int], configured: Optional[int]) -> int:
    """Return the effective timeout for one invocation."""
    if per_call is not None:
        return per_call
    if configured is not None:
        return configured
    return get_timeout_config().default_timeout_ms


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "is_valid_timeout_ms",
    "resolve_timeout_ms",
]

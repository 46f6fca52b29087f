"""dev_agent_plugin.config.defaults
================================

Central place for small, stable default values used across the plugin layer.
These defaults can be overridden via environment variables or constructor
parameters, but provide sensible fallbacks for local development and tests.

This module intentionally avoids importing from other packages to prevent
circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Invocation lifecycle ----
# Default per-invocation timeout when neither the call nor the plugin sets one.
DEFAULT_INVOCATION_TIMEOUT_MS = 30_000
# Environment override for the default timeout (positive integer, milliseconds).
DEFAULT_TIMEOUT_ENV = "DEV_AGENT_DEFAULT_TIMEOUT_MS"

# Invocation id shape: inv_<epoch millis>_<suffix>
INVOCATION_ID_PREFIX = "inv"
INVOCATION_ID_SUFFIX_LENGTH = 9
INVOCATION_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


# ---- Echo agent ----
ECHO_AGENT_NAME = "echo"
ECHO_AGENT_MODELS = ["echo-1"]


__all__ = [
    "DEFAULT_INVOCATION_TIMEOUT_MS",
    "DEFAULT_TIMEOUT_ENV",
    "INVOCATION_ID_PREFIX",
    "INVOCATION_ID_SUFFIX_LENGTH",
    "INVOCATION_ID_ALPHABET",
    "ECHO_AGENT_NAME",
    "ECHO_AGENT_MODELS",
]

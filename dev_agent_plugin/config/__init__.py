"""Configuration defaults for the plugin layer."""

from .defaults import (
    DEFAULT_INVOCATION_TIMEOUT_MS,
    DEFAULT_TIMEOUT_ENV,
    ECHO_AGENT_MODELS,
    ECHO_AGENT_NAME,
    INVOCATION_ID_ALPHABET,
    INVOCATION_ID_PREFIX,
    INVOCATION_ID_SUFFIX_LENGTH,
)

__all__ = [
    "DEFAULT_INVOCATION_TIMEOUT_MS",
    "DEFAULT_TIMEOUT_ENV",
    "INVOCATION_ID_PREFIX",
    "INVOCATION_ID_SUFFIX_LENGTH",
    "INVOCATION_ID_ALPHABET",
    "ECHO_AGENT_NAME",
    "ECHO_AGENT_MODELS",
]

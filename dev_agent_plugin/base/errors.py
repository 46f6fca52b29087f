"""Unified invocation error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``dev_agent_plugin.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.agent_error import AgentError
from .errors_parts.normalization import (
    CANCELLED_MESSAGE,
    TIMEOUT_MESSAGE,
    normalize_error,
    validation_error,
)

__all__ = [
    "ErrorCode",
    "AgentError",
    "normalize_error",
    "validation_error",
    "TIMEOUT_MESSAGE",
    "CANCELLED_MESSAGE",
]

"""
Error normalization mapping raw failures to the four caller-visible codes.

Precedence:
    1. ``AgentError`` passthrough (no double wrapping across layers).
    2. Fired signal: its reason is authoritative, ``timeout`` -> ``TIMEOUT``,
       anything else -> ``CANCELLED``. The raised value is never inspected,
       since a backend's reaction to cancellation is implementation-defined.
    3. ``UNKNOWN`` carrying the original message and the raw value as cause.
"""
from __future__ import annotations

from typing import Any, Optional

from ..cancellation import CancelReason, CancellationToken
from .agent_error import AgentError
from .error_code import ErrorCode

TIMEOUT_MESSAGE = "Invocation timed out"
CANCELLED_MESSAGE = "Invocation was cancelled"


def normalize_error(
    error: Any,
    signal: Optional[CancellationToken],
    invocation_id: Optional[str] = None,
) -> AgentError:
    """Normalize ``error`` into an :class:`AgentError`.

    Parameters:
        error: Whatever the backend raised (or the signal's reason when the
            caller checks the signal before delegating).
        signal: The invocation's composite signal; ``None`` skips step 2.
        invocation_id: Attached to newly built errors for correlation.
    """
    if isinstance(error, AgentError):
        return error

    if signal is not None and signal.cancelled:
        if signal.reason == CancelReason.TIMEOUT:
            return AgentError(ErrorCode.TIMEOUT, TIMEOUT_MESSAGE, invocation_id, cause=error)
        return AgentError(ErrorCode.CANCELLED, CANCELLED_MESSAGE, invocation_id, cause=error)

    if isinstance(error, BaseException):
        message = str(error) or type(error).__name__
    else:
        message = str(error)
    return AgentError(ErrorCode.UNKNOWN, message, invocation_id, cause=error)


def validation_error(message: str) -> AgentError:
    """Build a ``VALIDATION`` error for malformed caller input."""
    return AgentError(ErrorCode.VALIDATION, message)


__all__ = [
    "normalize_error",
    "validation_error",
    "TIMEOUT_MESSAGE",
    "CANCELLED_MESSAGE",
]

"""
Structured agent error exception type.

Wraps backend failures and lifecycle outcomes with a normalized `ErrorCode`
for consistent handling and structured logging.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .error_code import ErrorCode


@dataclass
class AgentError(Exception):
    """Represents a normalized invocation failure.

    Once produced, an ``AgentError`` is terminal: the normalizer passes it
    through unchanged instead of wrapping it again.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        invocation_id: Invocation the failure belongs to, when one was assigned.
        cause: Original value raised by the backend, for diagnostics.
    """

    code: ErrorCode
    message: str
    invocation_id: Optional[str] = None
    cause: Optional[Any] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining invocation, code, and message."""
        return f"{self.invocation_id or '-'} {self.code.value}: {self.message}"


__all__ = ["AgentError"]

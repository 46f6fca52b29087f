"""
Caller-facing invocation options.

All fields are optional; omitting them uses the agent's defaults. ``metadata``
is an opaque bag passed through to the backend untouched.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..cancellation import CancellationToken


@dataclass(frozen=True)
class InvokeOptions:
    """Options for configuring a single invocation.

    Attributes:
        timeout_ms: Positive integer overriding the agent's default timeout.
        signal: Externally owned cancellation token; cancelling it cancels
            the invocation with ``CANCELLED``.
        metadata: Arbitrary key/value pairs for the backend (tracing,
            provider-specific switches).
    """

    timeout_ms: Optional[int] = None
    signal: Optional[CancellationToken] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return a log-friendly dictionary (the signal is summarized)."""
        return {
            "timeout_ms": self.timeout_ms,
            "has_signal": self.signal is not None,
            "metadata": dict(self.metadata),
        }


__all__ = ["InvokeOptions"]

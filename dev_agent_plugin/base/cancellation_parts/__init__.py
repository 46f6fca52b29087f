"""Cancellation parts package.

Prefer importing from ``dev_agent_plugin.base.cancellation`` for the stable
surface.
"""

from .cancel_reason import CancelReason
from .cancelled_error import CancelledError
from .cancellation_token import CancellationToken
from .composite_signal import CompositeSignal, compose_signals

__all__ = [
    "CancelReason",
    "CancelledError",
    "CancellationToken",
    "CompositeSignal",
    "compose_signals",
]

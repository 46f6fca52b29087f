"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose stable cancellation constructs via the canonical
``dev_agent_plugin.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts`` for organization.

Notes
-----
- ``CancellationToken`` is both the per-invocation controller and the type
  callers pass as ``InvokeOptions.signal``.
- ``CompositeSignal`` merges controller, timeout, and external tokens into the
  single signal handed to backends.
- ``CancelledError`` is raised by operations that observe a cancellation request.
"""

from .cancellation_parts.cancel_reason import CancelReason
from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken
from .cancellation_parts.composite_signal import CompositeSignal, compose_signals

__all__ = [
    "CancelReason",
    "CancellationToken",
    "CancelledError",
    "CompositeSignal",
    "compose_signals",
]

"""Cancellation error type.

Defines the public ``CancelledError`` used to signal cooperative cancellation
inside agent backends. Kept isolated to satisfy one-class-per-file policy.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation observes a cancellation request.

    Backends typically raise this from ``raise_if_cancelled()``. The plugin
    layer never inspects it: the composite signal's reason decides whether the
    caller sees ``TIMEOUT`` or ``CANCELLED``.
    """


__all__ = ["CancelledError"]

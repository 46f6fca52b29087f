"""Invocation registry.

Maps invocation ids to their controller tokens. One registry per plugin
instance; it is the only shared mutable state of the lifecycle layer.

Concurrency
-----------
Every mutation is a point-wise keyed insert or delete under a single
``threading.Lock``. Controller tokens are cancelled outside the lock so
callbacks (which fire composite signals) never run while it is held.
"""
from __future__ import annotations

import secrets
import time
from threading import Lock
from typing import Dict, FrozenSet

from ..config.defaults import (
    INVOCATION_ID_ALPHABET,
    INVOCATION_ID_PREFIX,
    INVOCATION_ID_SUFFIX_LENGTH,
)
from .cancellation import CancelReason, CancellationToken


def generate_invocation_id() -> str:
    """Return a fresh ``inv_<epoch millis>_<random base36>`` identifier."""
    suffix = "".join(secrets.choice(INVOCATION_ID_ALPHABET) for _ in range(INVOCATION_ID_SUFFIX_LENGTH))
    return f"{INVOCATION_ID_PREFIX}_{int(time.time() * 1000)}_{suffix}"


class InvocationRegistry:
    """Thread-safe map from invocation id to its cancellation controller."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._active: Dict[str, CancellationToken] = {}

    def register(self, invocation_id: str) -> CancellationToken:
        """Create, store, and return a fresh controller for ``invocation_id``.

        Raises:
            ValueError: If the id is already tracked.
        """
        controller = CancellationToken()
        with self._lock:
            if invocation_id in self._active:
                raise ValueError(f"Invocation '{invocation_id}' already registered")
            self._active[invocation_id] = controller
        return controller

    def cancel(self, invocation_id: str) -> bool:
        """Trigger and remove the controller for ``invocation_id``.

        Unknown or already-terminal ids are a no-op. Returns whether a tracked
        invocation was cancelled.
        """
        with self._lock:
            controller = self._active.pop(invocation_id, None)
        if controller is None:
            return False
        controller.cancel(CancelReason.CANCELLED)
        return True

    def deregister(self, invocation_id: str) -> None:
        """Remove ``invocation_id`` if present; safe from any terminal path."""
        with self._lock:
            self._active.pop(invocation_id, None)

    def active_ids(self) -> FrozenSet[str]:
        """Snapshot of currently tracked ids."""
        with self._lock:
            return frozenset(self._active)

    def __contains__(self, invocation_id: object) -> bool:
        with self._lock:
            return invocation_id in self._active

    def __len__(self) -> int:
        with self._lock:
            return len(self._active)


__all__ = ["InvocationRegistry", "generate_invocation_id"]

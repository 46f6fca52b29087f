"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` class used by the plugin layer and by agent
backends to enable early termination of long-running or streaming invocations
via cooperative polling, blocking waits, or callbacks.
"""

from __future__ import annotations

from contextlib import suppress
from threading import Event, Lock
from typing import Callable, List

from .state import State
from .cancelled_error import CancelledError

CancelCallback = Callable[["str | None"], None]


class CancellationToken:
    """A cooperative cancellation token with optional cascading semantics.

    Thread-safe. Cancellation is single-fire: the first ``cancel`` wins and
    fixes the reason, later calls are no-ops. Child tokens inherit cancellation
    when the parent is cancelled, and subscribed callbacks run exactly once.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._event = Event()
        self._children: List[CancellationToken] = []
        self._callbacks: List[CancelCallback] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cooperative cancellation, cascade to children, run callbacks."""
        with self._lock:
            if not self._state.fire(reason):
                return
            children = list(self._children)
            callbacks = list(self._callbacks)
            self._callbacks.clear()
        self._event.set()
        for child in children:
            child.cancel(reason)
        for callback in callbacks:
            with suppress(Exception):
                callback(reason)

    def add_callback(self, callback: CancelCallback) -> Callable[[], None]:
        """Subscribe ``callback(reason)`` to cancellation.

        Runs immediately when the token is already cancelled. Returns a detach
        function that unsubscribes the callback; detaching twice is harmless.
        """
        with self._lock:
            fired = self._state.cancelled
            reason = self._state.reason
            if not fired:
                self._callbacks.append(callback)
        if fired:
            callback(reason)
            return lambda: None

        def _detach() -> None:
            with self._lock:
                with suppress(ValueError):
                    self._callbacks.remove(callback)

        return _detach

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def wait(self, timeout: float | None = None) -> bool:
        """Block until cancelled or ``timeout`` seconds elapse.

        Returns ``True`` when the token is cancelled. Backends use this in place
        of ``time.sleep`` so they abort promptly.
        """
        return self._event.wait(timeout)

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if token is cancelled."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "operation cancelled")

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"{type(self).__name__}(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, children={len(self._children)})"
        )


__all__ = ["CancellationToken", "CancelCallback"]

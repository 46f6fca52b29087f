"""Composite invocation signal.

Combines an invocation's own controller token, a timeout timer, and an
optional caller-supplied token into one single-fire ``CancellationToken``
whose ``reason`` is a :class:`CancelReason`.

Timer strategy
--------------
A daemon ``threading.Timer`` backs the timeout source. It is cancelled the
moment the composite fires from any source and again on :meth:`dispose`, so
no timer outlives its invocation or fires late into a reused signal.
"""

from __future__ import annotations

import threading
from contextlib import suppress
from typing import Callable, List, Optional

from .cancel_reason import CancelReason
from .cancellation_token import CancellationToken


class CompositeSignal(CancellationToken):
    """Single-fire union of controller, timeout, and external cancellation.

    The first source to fire decides the reason:

    * controller cancelled -> ``CancelReason.CANCELLED``
    * timer elapsed -> ``CancelReason.TIMEOUT``
    * external token cancelled -> ``CancelReason.CANCELLED``
    """

    def __init__(
        self,
        controller: CancellationToken,
        timeout_ms: int,
        external: Optional[CancellationToken] = None,
    ) -> None:
        super().__init__()
        self._timeout_ms = timeout_ms
        self._detachers: List[Callable[[], None]] = []
        self._timer = threading.Timer(timeout_ms / 1000.0, self._on_timeout)
        self._timer.daemon = True

        self._detachers.append(controller.add_callback(self._on_source_cancelled))
        if external is not None and not self.cancelled:
            self._detachers.append(external.add_callback(self._on_source_cancelled))
        if not self.cancelled:
            self._timer.start()

    @property
    def timeout_ms(self) -> int:
        """Effective timeout this signal was composed with."""
        return self._timeout_ms

    @property
    def timed_out(self) -> bool:
        """Whether the timeout source won."""
        return self.reason == CancelReason.TIMEOUT

    def cancel(self, reason: str | None = None) -> None:
        """Fire the signal (first reason wins) and release the other sources."""
        super().cancel(reason or CancelReason.CANCELLED)
        self.dispose()

    def dispose(self) -> None:
        """Stop the timer and detach from the source tokens.

        Idempotent. Called on every terminal transition of the owning
        invocation; leaves the fired/unfired state untouched.
        """
        self._timer.cancel()
        detachers, self._detachers = self._detachers, []
        for detach in detachers:
            with suppress(Exception):
                detach()

    def _on_timeout(self) -> None:
        self.cancel(CancelReason.TIMEOUT)

    def _on_source_cancelled(self, _reason: str | None) -> None:
        self.cancel(CancelReason.CANCELLED)


def compose_signals(
    controller: CancellationToken,
    timeout_ms: int,
    external: Optional[CancellationToken] = None,
) -> CompositeSignal:
    """Return the composite signal for one invocation."""
    return CompositeSignal(controller, timeout_ms, external)


__all__ = ["CompositeSignal", "compose_signals"]

"""Cancellable iterator façade around a backend stream.

``InvocationStream`` decorates the lazy sequence returned by a backend's
``_do_invoke_stream`` with the invocation lifecycle:

* each ``next()`` checks the composite signal before pulling from the backend;
* natural exhaustion, a failing pull, ``close()``, ``throw()`` and the signal
  firing all release the invocation exactly once (deregistration + signal
  disposal), so an abandoned stream is released by its timeout;
* failures surface as normalized :class:`AgentError` on the affected pull;
* once closed, thrown into, exhausted or failed, further pulls raise
  ``StopIteration`` without touching the backend.
"""
from __future__ import annotations

import logging
from contextlib import suppress
from threading import Lock
from typing import Callable, Iterator, Optional

from ..cancellation import CompositeSignal
from ..errors import normalize_error
from ..logging import LogContext, normalized_log_event
from ..models import StreamChunk


class InvocationStream:
    """Single-pass iterator of :class:`StreamChunk` for one invocation.

    Also usable as a context manager; leaving the ``with`` block closes the
    stream (and the backend generator) if it has not finished yet. ``close``
    may be called from another thread while a pull is blocked: it fires the
    signal so a cooperative backend wakes up, and the blocked pull ends the
    stream.
    """

    def __init__(
        self,
        inner: Iterator[StreamChunk],
        *,
        invocation_id: str,
        signal: CompositeSignal,
        release: Callable[[], None],
        logger: Optional[logging.Logger] = None,
        ctx: Optional[LogContext] = None,
    ) -> None:
        self._inner = inner
        self._invocation_id = invocation_id
        self._signal = signal
        self._release = release
        self._logger = logger
        self._ctx = ctx
        self._lock = Lock()
        self._released = False
        self._closed = False
        self._chunks = 0
        # Runs immediately when the signal already fired.
        signal.add_callback(self._on_signal_fired)

    @property
    def invocation_id(self) -> str:
        """Identifier to pass to ``cancel`` for this stream."""
        return self._invocation_id

    @property
    def signal(self) -> CompositeSignal:
        """Composite signal observed by the backend."""
        return self._signal

    @property
    def finished(self) -> bool:
        """Whether the invocation reached a terminal state."""
        return self._released

    def __iter__(self) -> "InvocationStream":
        return self

    def __next__(self) -> StreamChunk:
        if self._closed:
            raise StopIteration
        try:
            if self._signal.cancelled:
                with suppress(Exception):
                    self._close_inner()
                raise normalize_error(self._signal.reason, self._signal, self._invocation_id)
            chunk = next(self._inner)
        except StopIteration:
            self._closed = True
            self._finish("stream.end", phase="finalize", emitted=self._chunks > 0)
            raise
        except Exception as exc:
            if self._closed:
                # closed from another thread while this pull was in flight
                raise StopIteration from None
            self._closed = True
            err = normalize_error(exc, self._signal, self._invocation_id)
            self._finish("stream.error", phase="error", error_code=err.code.value, level=logging.WARNING)
            if err is exc:
                raise
            raise err from exc
        if self._closed:
            raise StopIteration
        self._chunks += 1
        return chunk

    def close(self) -> None:
        """Stop early: release the invocation and close the backend stream."""
        self._closed = True
        self._finish("stream.close", phase="close", emitted=self._chunks > 0)
        self._signal.cancel()
        self._close_inner()

    def throw(self, error: BaseException) -> StreamChunk:
        """Inject ``error`` into the backend stream.

        The invocation is released and its signal fired first. When the
        backend iterator cannot receive errors, ``error`` is re-raised as-is.
        """
        self._closed = True
        self._finish("stream.throw", phase="error", emitted=self._chunks > 0)
        self._signal.cancel()
        throw = getattr(self._inner, "throw", None)
        if throw is None:
            raise error
        return throw(error)

    def __enter__(self) -> "InvocationStream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _close_inner(self) -> None:
        close = getattr(self._inner, "close", None)
        if close is None:
            return
        # ValueError: the generator is still running a pull on another
        # thread; the fired signal stops it there.
        with suppress(ValueError):
            close()

    def _on_signal_fired(self, reason: Optional[str]) -> None:
        """Release as soon as the timeout or a cancel fires; the next pull raises."""
        err = normalize_error(reason, self._signal, self._invocation_id)
        self._finish("stream.error", phase="error", error_code=err.code.value, level=logging.WARNING)

    def _finish(self, event: str, *, phase: str, level: int = logging.INFO, **fields) -> None:
        """Release the invocation once, logging the terminal transition."""
        with self._lock:
            if self._released:
                return
            self._released = True
        self._release()
        if self._logger is not None:
            normalized_log_event(
                self._logger,
                event,
                self._ctx,
                phase=phase,
                level=level,
                chunks=self._chunks,
                **fields,
            )


__all__ = ["InvocationStream"]

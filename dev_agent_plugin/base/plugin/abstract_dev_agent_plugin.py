"""Reusable base class for AI development agent plugins.

Purpose:
- Own the invocation lifecycle shared by every agent: input validation,
  invocation tracking, timeout composition, cancellation, error
  normalization, and streaming cleanup.
- Leave the agent-specific work to three hooks implemented by subclasses.

Lifecycle (single-shot and streaming alike):
    validate -> register id -> compose signal -> delegate -> normalize -> release

Validation happens before any registry mutation, so an invalid call never
leaks a tracked id. Release (deregistration plus timer disposal) runs on every
exit path exactly once.

Cancellation is cooperative: backends receive the composite signal in
``InternalInvokeOptions.signal`` and must observe it (``wait``,
``raise_if_cancelled``, ``cancelled``) at their own blocking points. Nothing
here preempts a backend that ignores it.

Example::

    class MyAgent(AbstractDevAgentPlugin):
        def _do_invoke(self, prompt, options):
            return AgentResult(output="done", invocation_id=options.invocation_id)

        def _do_invoke_stream(self, prompt, options):
            yield StreamChunk(text="streaming...")

        def _do_get_capabilities(self):
            return AgentCapabilities(streaming=True, cancellation=True, models=["my-model"])
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, Optional, Tuple

from ..cancellation import CancellationToken, CompositeSignal, compose_signals
from ..dto import AgentPluginParams
from ..errors import normalize_error, validation_error
from ..interfaces import DevAgent
from ..logging import LogContext, get_logger, normalized_log_event
from ..models import (
    AgentCapabilities,
    AgentResult,
    InternalInvokeOptions,
    InvokeOptions,
    StreamChunk,
)
from ..registry import InvocationRegistry, generate_invocation_id
from ..streaming import InvocationStream
from ..timeouts import get_timeout_config, is_valid_timeout_ms, resolve_timeout_ms


class AbstractDevAgentPlugin(DevAgent):
    """Base implementation of :class:`DevAgent`.

    Subclasses must implement:
    - ``_do_invoke``: perform one complete invocation.
    - ``_do_invoke_stream``: return an iterator (typically a generator) of
      :class:`StreamChunk`.
    - ``_do_get_capabilities``: return the static capability descriptor.
    """

    def __init__(
        self,
        params: Optional[AgentPluginParams] = None,
        *,
        default_timeout_ms: Optional[int] = None,
    ) -> None:
        """Initialize the plugin.

        Parameters:
            params: Validated construction parameters.
            default_timeout_ms: Shortcut overriding ``params.default_timeout_ms``.

        Raises:
            ValueError: If ``default_timeout_ms`` is not a positive integer.
        """
        self._params = params or AgentPluginParams()
        if default_timeout_ms is not None and not is_valid_timeout_ms(default_timeout_ms):
            raise ValueError(f"default_timeout_ms must be a positive integer, got {default_timeout_ms!r}")
        self._configured_timeout_ms = (
            default_timeout_ms if default_timeout_ms is not None else self._params.default_timeout_ms
        )
        self._agent_name = self._params.agent_name or type(self).__name__
        self._registry = InvocationRegistry()
        self._logger = get_logger(f"dev_agent.{self._agent_name}")

    # ----- Introspection -----
    @property
    def agent_name(self) -> str:
        """Logical agent name used in log context."""
        return self._agent_name

    @property
    def default_timeout_ms(self) -> int:
        """Timeout applied when a call does not set ``timeout_ms``."""
        if self._configured_timeout_ms is not None:
            return self._configured_timeout_ms
        return get_timeout_config().default_timeout_ms

    @property
    def active_invocations(self) -> FrozenSet[str]:
        """Snapshot of invocation ids that have not reached a terminal state."""
        return self._registry.active_ids()

    # ----- Public API -----
    def invoke(self, prompt: str, options: Optional[InvokeOptions] = None) -> AgentResult:
        """Invoke the agent and block until the complete result is available.

        Raises:
            AgentError: ``VALIDATION`` for bad input, ``TIMEOUT``/``CANCELLED``
                when the composite signal fired, ``UNKNOWN`` otherwise.
        """
        options = self._validate(prompt, options)
        invocation_id, signal = self._start(options)
        ctx = self._log_context(invocation_id, options)
        normalized_log_event(self._logger, "invoke.start", ctx, phase="start", timeout_ms=signal.timeout_ms)

        try:
            signal.raise_if_cancelled()
            result = self._do_invoke(prompt, self._internal_options(options, invocation_id, signal))
            # A result that lands after the signal fired loses to the signal.
            signal.raise_if_cancelled()
        except Exception as exc:
            err = normalize_error(exc, signal, invocation_id)
            normalized_log_event(
                self._logger,
                "invoke.error",
                ctx,
                phase="error",
                error_code=err.code.value,
                level=logging.WARNING,
            )
            if err is exc:
                raise
            raise err from exc
        finally:
            self._release(invocation_id, signal)

        normalized_log_event(self._logger, "invoke.end", ctx, phase="finalize", emitted=True)
        return result

    def invoke_stream(self, prompt: str, options: Optional[InvokeOptions] = None) -> InvocationStream:
        """Invoke the agent and return a lifecycle-managed chunk iterator.

        Validation runs now, before the iterator is returned. Timeout and
        cancellation failures are raised by the ``next()`` they affect; the
        invocation itself is released the moment the signal fires, even if
        the stream is never pulled again.
        """
        options = self._validate(prompt, options)
        invocation_id, signal = self._start(options)
        ctx = self._log_context(invocation_id, options)

        try:
            inner = iter(self._do_invoke_stream(prompt, self._internal_options(options, invocation_id, signal)))
        except Exception as exc:
            self._release(invocation_id, signal)
            err = normalize_error(exc, signal, invocation_id)
            normalized_log_event(
                self._logger,
                "stream.error",
                ctx,
                phase="start",
                error_code=err.code.value,
                level=logging.WARNING,
            )
            if err is exc:
                raise
            raise err from exc

        normalized_log_event(self._logger, "stream.start", ctx, phase="start", timeout_ms=signal.timeout_ms)
        return InvocationStream(
            inner,
            invocation_id=invocation_id,
            signal=signal,
            release=lambda: self._release(invocation_id, signal),
            logger=self._logger,
            ctx=ctx,
        )

    def cancel(self, invocation_id: str) -> None:
        """Cancel an in-flight invocation.

        Unknown ids and invocations that already reached a terminal state are
        silently ignored.
        """
        if self._registry.cancel(invocation_id):
            normalized_log_event(
                self._logger,
                "invocation.cancel",
                LogContext(agent=self._agent_name, invocation_id=invocation_id),
                phase="cancel",
            )

    def get_capabilities(self) -> AgentCapabilities:
        """Return the backend's static capability descriptor."""
        return self._do_get_capabilities()

    # ----- Abstract surface -----
    def _do_invoke(self, prompt: str, options: InternalInvokeOptions) -> AgentResult:  # pragma: no cover - abstract
        """Perform the actual invocation; must observe ``options.signal``."""
        raise NotImplementedError

    def _do_invoke_stream(
        self, prompt: str, options: InternalInvokeOptions
    ) -> Iterable[StreamChunk]:  # pragma: no cover - abstract
        """Return the backend stream; must observe ``options.signal``."""
        raise NotImplementedError

    def _do_get_capabilities(self) -> AgentCapabilities:  # pragma: no cover - abstract
        """Return the capabilities of this agent implementation."""
        raise NotImplementedError

    # ----- helpers -----
    def _validate(self, prompt: str, options: Optional[InvokeOptions]) -> InvokeOptions:
        """Reject malformed input before anything is registered."""
        if not isinstance(prompt, str) or not prompt.strip():
            raise validation_error("Prompt is required")
        if options is None:
            return InvokeOptions()
        if not isinstance(options, InvokeOptions):
            raise validation_error("options must be an InvokeOptions instance")
        if options.timeout_ms is not None and not is_valid_timeout_ms(options.timeout_ms):
            raise validation_error("timeout_ms must be a positive integer")
        if options.signal is not None and not isinstance(options.signal, CancellationToken):
            raise validation_error("signal must be a CancellationToken")
        return options

    def _start(self, options: InvokeOptions) -> Tuple[str, CompositeSignal]:
        """Register a fresh invocation and compose its signal."""
        invocation_id = generate_invocation_id()
        controller = self._registry.register(invocation_id)
        timeout_ms = resolve_timeout_ms(options.timeout_ms, self._configured_timeout_ms)
        return invocation_id, compose_signals(controller, timeout_ms, options.signal)

    def _release(self, invocation_id: str, signal: CompositeSignal) -> None:
        self._registry.deregister(invocation_id)
        signal.dispose()

    @staticmethod
    def _internal_options(
        options: InvokeOptions, invocation_id: str, signal: CompositeSignal
    ) -> InternalInvokeOptions:
        return InternalInvokeOptions(
            timeout_ms=options.timeout_ms,
            metadata=options.metadata,
            invocation_id=invocation_id,
            signal=signal,
        )

    def _log_context(self, invocation_id: str, options: InvokeOptions) -> LogContext:
        return LogContext(
            agent=self._agent_name,
            invocation_id=invocation_id,
            extra={"metadata_keys": [str(k) for k in options.metadata] or None},
        )


__all__ = ["AbstractDevAgentPlugin"]

"""Deterministic echo agent for offline testing.

Purpose
-------
Provide a backend that implements the ``AbstractDevAgentPlugin`` hooks
without any external calls, so higher layers (lifecycle, logging, streaming
cleanup) can be exercised in tests and local wiring.

Behavior
--------
- ``invoke`` returns ``"result: <prompt>"`` and echoes the invocation id.
- ``invoke_stream`` yields the configured chunks, or the echo output split
  into fixed-size chunks when none are configured.
- Delays are spent in ``signal.wait`` so cancellation and timeouts abort the
  wait promptly; the backend then raises ``CancelledError``, which the base
  class reclassifies by the signal's reason.
"""

from __future__ import annotations

from threading import Lock
from typing import Iterator, List, Optional, Sequence

from ..base.cancellation import CompositeSignal
from ..base.dto import AgentPluginParams
from ..base.models import (
    AgentCapabilities,
    AgentResult,
    InternalInvokeOptions,
    StreamChunk,
    TokenUsage,
)
from ..base.plugin import AbstractDevAgentPlugin
from ..config.defaults import ECHO_AGENT_MODELS, ECHO_AGENT_NAME


class EchoDevAgent(AbstractDevAgentPlugin):
    """Agent that echoes its prompt, with knobs for latency and failures.

    Attributes:
        invoke_delay_ms: Time ``invoke`` spends before answering.
        invoke_error: Exception raised by ``invoke`` instead of answering.
        stream_chunks: Chunks yielded by ``invoke_stream``; ``None`` derives
            them from the echo output.
        stream_chunk_delay_ms: Time spent before each chunk.
        recorded_prompts / recorded_options: What the backend received.
    """

    def __init__(
        self,
        params: Optional[AgentPluginParams] = None,
        *,
        default_timeout_ms: Optional[int] = None,
        models: Optional[Sequence[str]] = None,
        invoke_delay_ms: int = 0,
        invoke_error: Optional[BaseException] = None,
        stream_chunks: Optional[List[StreamChunk]] = None,
        stream_chunk_delay_ms: int = 0,
        streaming: bool = True,
    ) -> None:
        params = params or AgentPluginParams(agent_name=ECHO_AGENT_NAME)
        super().__init__(params, default_timeout_ms=default_timeout_ms)
        self.models = list(models) if models is not None else list(ECHO_AGENT_MODELS)
        self.invoke_delay_ms = invoke_delay_ms
        self.invoke_error = invoke_error
        self.stream_chunks = stream_chunks
        self.stream_chunk_delay_ms = stream_chunk_delay_ms
        self.streaming = streaming
        self.recorded_prompts: List[str] = []
        self.recorded_options: List[InternalInvokeOptions] = []
        self._record_lock = Lock()

    # ------------------------------------------------------------------
    # Backend hooks

    def _do_invoke(self, prompt: str, options: InternalInvokeOptions) -> AgentResult:
        self._record(prompt, options)
        if self.invoke_error is not None:
            raise self.invoke_error
        _pause(self.invoke_delay_ms, options.signal)
        output = echo_output(prompt)
        return AgentResult(
            output=output,
            invocation_id=options.invocation_id,
            usage=TokenUsage(input_tokens=len(prompt.split()), output_tokens=len(output.split())),
        )

    def _do_invoke_stream(self, prompt: str, options: InternalInvokeOptions) -> Iterator[StreamChunk]:
        self._record(prompt, options)
        if self.stream_chunks is not None:
            chunks = list(self.stream_chunks)
        else:
            chunks = [StreamChunk(text=t) for t in chunk_text(echo_output(prompt))]
        return self._stream(chunks, options.signal)

    def _do_get_capabilities(self) -> AgentCapabilities:
        return AgentCapabilities(streaming=self.streaming, cancellation=True, models=list(self.models))

    # ------------------------------------------------------------------
    # Helper utilities

    def _stream(self, chunks: List[StreamChunk], signal: CompositeSignal) -> Iterator[StreamChunk]:
        for chunk in chunks:
            signal.raise_if_cancelled()
            _pause(self.stream_chunk_delay_ms, signal)
            yield chunk

    def _record(self, prompt: str, options: InternalInvokeOptions) -> None:
        with self._record_lock:
            self.recorded_prompts.append(prompt)
            self.recorded_options.append(options)


def _pause(delay_ms: int, signal: CompositeSignal) -> None:
    """Sleep cooperatively; raise ``CancelledError`` if the signal fires."""
    if delay_ms > 0:
        signal.wait(delay_ms / 1000.0)
    signal.raise_if_cancelled()


def echo_output(prompt: str) -> str:
    """Return the deterministic echo answer for ``prompt``."""
    return f"result: {prompt}"


def chunk_text(text: str, chunk_size: int = 16) -> List[str]:
    """Split text into fixed-size chunks for deterministic streaming."""
    if not text:
        return []
    return [text[i : i + chunk_size] for i in range(0, len(text), chunk_size)]


__all__ = ["EchoDevAgent", "echo_output", "chunk_text"]

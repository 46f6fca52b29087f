"""Tests for the invocation data models."""
from __future__ import annotations

import dataclasses

import pytest

from dev_agent_plugin import (
    AgentResult,
    CancellationToken,
    InternalInvokeOptions,
    InvokeOptions,
    StreamChunk,
    TokenUsage,
)
from dev_agent_plugin.base.cancellation import compose_signals


def test_invoke_options_defaults_and_dict():
    opts = InvokeOptions()
    assert opts.timeout_ms is None and opts.signal is None and opts.metadata == {}

    data = InvokeOptions(timeout_ms=10, signal=CancellationToken(), metadata={"k": "v"}).to_dict()
    assert data == {"timeout_ms": 10, "has_signal": True, "metadata": {"k": "v"}}


def test_invoke_options_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        InvokeOptions().timeout_ms = 5  # type: ignore[misc]


def test_internal_options_carry_id_and_signal():
    signal = compose_signals(CancellationToken(), 1_000)
    try:
        opts = InternalInvokeOptions(timeout_ms=None, invocation_id="inv_1_a", signal=signal)
        assert opts.signal is signal
        assert isinstance(opts, InvokeOptions)
        assert opts.to_dict()["invocation_id"] == "inv_1_a"
    finally:
        signal.dispose()


def test_agent_result_dict():
    result = AgentResult(output="ok", invocation_id="inv_1_a", usage=TokenUsage(input_tokens=1, output_tokens=2))
    assert result.to_dict() == {
        "output": "ok",
        "invocation_id": "inv_1_a",
        "usage": {"input_tokens": 1, "output_tokens": 2},
    }
    assert AgentResult(output="ok", invocation_id="x").to_dict()["usage"] is None


def test_stream_chunk_dict():
    chunk = StreamChunk("hi", metadata={"progress": 0.5})
    assert chunk.to_dict() == {"text": "hi", "metadata": {"progress": 0.5}}
    assert StreamChunk("hi") == StreamChunk("hi")

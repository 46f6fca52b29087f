"""Unit tests covering the deterministic echo agent used in tests."""

from __future__ import annotations

import pytest

from dev_agent_plugin import StreamChunk
from dev_agent_plugin.mock import EchoDevAgent, chunk_text, echo_output


def test_echo_output_format() -> None:
    assert echo_output("fix the bug") == "result: fix the bug"


@pytest.mark.parametrize(
    "text, size, expected",
    [
        ("", 4, []),
        ("abcd", 4, ["abcd"]),
        ("abcdefghij", 4, ["abcd", "efgh", "ij"]),
    ],
)
def test_chunk_text(text: str, size: int, expected: list) -> None:
    assert chunk_text(text, size) == expected


def test_usage_counts_words(echo_agent: EchoDevAgent) -> None:
    result = echo_agent.invoke("fix the bug")
    assert result.usage is not None
    assert result.usage.input_tokens == 3
    assert result.usage.output_tokens == 4


def test_records_prompts_and_options(echo_agent: EchoDevAgent) -> None:
    echo_agent.invoke("one")
    stream = echo_agent.invoke_stream("two")
    stream.close()

    assert echo_agent.recorded_prompts == ["one", "two"]
    assert len(echo_agent.recorded_options) == 2


def test_configured_chunks_are_copied_per_stream() -> None:
    chunks = [StreamChunk("x", metadata={"tool": "grep"})]
    agent = EchoDevAgent(stream_chunks=chunks)

    assert list(agent.invoke_stream("a")) == chunks
    assert list(agent.invoke_stream("b")) == chunks

"""Lifecycle tests for ``invoke_stream``.

The stream must yield backend chunks in order, surface timeout and
cancellation on the affected pull, and release its invocation exactly once
on exhaustion, failure, ``close()`` or ``throw()``.
"""
from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List

import pytest

from dev_agent_plugin import (
    AbstractDevAgentPlugin,
    AgentError,
    CancellationToken,
    ErrorCode,
    InvokeOptions,
    StreamChunk,
)
from dev_agent_plugin.base.streaming import InvocationStream
from dev_agent_plugin.mock import EchoDevAgent
from dev_agent_plugin.tests.utils import wait_for


def _hello_world_agent(**kwargs) -> EchoDevAgent:
    return EchoDevAgent(stream_chunks=[StreamChunk("hello "), StreamChunk("world")], **kwargs)


class _ClosableIterator:
    """Iterator without ``throw`` that records ``close`` calls."""

    def __init__(self, items: List[StreamChunk]) -> None:
        self._items = iter(items)
        self.closed = False

    def __iter__(self) -> "_ClosableIterator":
        return self

    def __next__(self) -> StreamChunk:
        return next(self._items)

    def close(self) -> None:
        self.closed = True


class TestStreamSuccess:
    def test_yields_chunks_in_order(self) -> None:
        agent = _hello_world_agent()

        chunks = list(agent.invoke_stream("greet"))

        assert chunks == [StreamChunk("hello "), StreamChunk("world")]
        assert agent.active_invocations == frozenset()

    def test_stream_is_tracked_until_exhausted(self) -> None:
        agent = _hello_world_agent()
        stream = agent.invoke_stream("greet")

        assert isinstance(stream, InvocationStream)
        assert agent.active_invocations == frozenset({stream.invocation_id})
        next(stream)
        assert not stream.finished
        next(stream)
        with pytest.raises(StopIteration):
            next(stream)
        assert stream.finished
        assert agent.active_invocations == frozenset()

    def test_default_chunks_reassemble_echo_output(self, echo_agent: EchoDevAgent) -> None:
        text = "".join(chunk.text for chunk in echo_agent.invoke_stream("refactor the parser module"))
        assert text == "result: refactor the parser module"

    def test_backend_sees_same_id_as_stream(self) -> None:
        agent = _hello_world_agent()
        stream = agent.invoke_stream("greet")
        assert agent.recorded_options[0].invocation_id == stream.invocation_id
        assert stream.signal is agent.recorded_options[0].signal
        stream.close()


class TestStreamCancellation:
    def test_cancel_after_first_chunk(self) -> None:
        agent = _hello_world_agent()
        stream = agent.invoke_stream("greet")
        assert next(stream) == StreamChunk("hello ")

        agent.cancel(stream.invocation_id)

        with pytest.raises(AgentError) as excinfo:
            next(stream)
        assert excinfo.value.code is ErrorCode.CANCELLED
        assert excinfo.value.invocation_id == stream.invocation_id
        assert stream.finished
        assert agent.active_invocations == frozenset()

    def test_external_signal_cancels_stream(self) -> None:
        token = CancellationToken()
        agent = _hello_world_agent()
        stream = agent.invoke_stream("greet", InvokeOptions(signal=token))
        next(stream)

        token.cancel()

        with pytest.raises(AgentError) as excinfo:
            next(stream)
        assert excinfo.value.code is ErrorCode.CANCELLED

    def test_timeout_during_chunk_wait(self) -> None:
        agent = _hello_world_agent(default_timeout_ms=50, stream_chunk_delay_ms=200)
        stream = agent.invoke_stream("greet")

        with pytest.raises(AgentError) as excinfo:
            next(stream)

        assert excinfo.value.code is ErrorCode.TIMEOUT
        assert agent.active_invocations == frozenset()

    def test_per_call_timeout_applies_to_stream(self) -> None:
        agent = _hello_world_agent(stream_chunk_delay_ms=200)
        stream = agent.invoke_stream("greet", InvokeOptions(timeout_ms=50))

        with pytest.raises(AgentError) as excinfo:
            list(stream)

        assert excinfo.value.code is ErrorCode.TIMEOUT

    def test_cancel_before_first_pull_closes_backend(self) -> None:
        inner = _ClosableIterator([StreamChunk("a")])

        class _Agent(EchoDevAgent):
            def _do_invoke_stream(self, prompt, options):
                return inner

        agent = _Agent()
        stream = agent.invoke_stream("greet")
        agent.cancel(stream.invocation_id)

        with pytest.raises(AgentError) as excinfo:
            next(stream)
        assert excinfo.value.code is ErrorCode.CANCELLED
        assert inner.closed

    def test_unpulled_stream_is_released_when_timeout_fires(self) -> None:
        agent = _hello_world_agent()
        stream = agent.invoke_stream("greet", InvokeOptions(timeout_ms=50))

        wait_for(lambda: agent.active_invocations == frozenset())

        assert stream.finished
        with pytest.raises(AgentError) as excinfo:
            next(stream)
        assert excinfo.value.code is ErrorCode.TIMEOUT
        with pytest.raises(StopIteration):
            next(stream)

    def test_cancel_releases_unpulled_stream_immediately(self) -> None:
        agent = _hello_world_agent()
        stream = agent.invoke_stream("greet")

        agent.cancel(stream.invocation_id)

        assert stream.finished
        assert agent.active_invocations == frozenset()

    def test_already_cancelled_external_signal_releases_at_call_time(self) -> None:
        token = CancellationToken()
        token.cancel()
        agent = _hello_world_agent()

        stream = agent.invoke_stream("greet", InvokeOptions(signal=token))

        assert agent.active_invocations == frozenset()
        with pytest.raises(AgentError) as excinfo:
            next(stream)
        assert excinfo.value.code is ErrorCode.CANCELLED


class TestStreamEarlyExit:
    def test_closed_stream_stops_pulling_from_plain_iterator(self) -> None:
        class _ListAgent(EchoDevAgent):
            def _do_invoke_stream(self, prompt, options):
                return iter([StreamChunk("a"), StreamChunk("b"), StreamChunk("c")])

        agent = _ListAgent()
        stream = agent.invoke_stream("greet")
        assert next(stream).text == "a"

        stream.close()

        assert list(stream) == []
        assert agent.active_invocations == frozenset()

    def test_thrown_stream_stops_pulling_from_plain_iterator(self) -> None:
        class _ListAgent(EchoDevAgent):
            def _do_invoke_stream(self, prompt, options):
                return iter([StreamChunk("a"), StreamChunk("b")])

        stream = _ListAgent().invoke_stream("greet")
        with pytest.raises(KeyError):
            stream.throw(KeyError("stop"))

        assert list(stream) == []

    def test_close_from_another_thread_wakes_blocked_pull(self) -> None:
        entered = threading.Event()

        class _BlockingAgent(EchoDevAgent):
            def _do_invoke_stream(self, prompt, options):
                def _gen() -> Iterator[StreamChunk]:
                    entered.set()
                    options.signal.wait(5.0)
                    options.signal.raise_if_cancelled()
                    yield StreamChunk("late")

                return _gen()

        agent = _BlockingAgent()
        stream = agent.invoke_stream("greet")
        with ThreadPoolExecutor(max_workers=1) as pool:
            future = pool.submit(list, stream)
            assert entered.wait(2.0)

            stream.close()

            assert future.result(timeout=2) == []
        assert stream.signal.cancelled
        assert agent.active_invocations == frozenset()


    def test_close_releases_invocation(self) -> None:
        agent = _hello_world_agent()
        stream = agent.invoke_stream("greet")
        next(stream)

        stream.close()
        stream.close()

        assert stream.finished
        assert agent.active_invocations == frozenset()
        with pytest.raises(StopIteration):
            next(stream)

    def test_context_manager_closes_on_exit(self) -> None:
        agent = _hello_world_agent()
        with agent.invoke_stream("greet") as stream:
            first = next(stream)
        assert first.text == "hello "
        assert stream.finished
        assert agent.active_invocations == frozenset()

    def test_throw_releases_and_reraises(self) -> None:
        agent = _hello_world_agent()
        stream = agent.invoke_stream("greet")
        next(stream)

        with pytest.raises(ValueError, match="consumer failed"):
            stream.throw(ValueError("consumer failed"))

        assert stream.finished
        assert agent.active_invocations == frozenset()

    def test_throw_without_backend_support_reraises(self) -> None:
        inner = _ClosableIterator([StreamChunk("a")])

        class _Agent(EchoDevAgent):
            def _do_invoke_stream(self, prompt, options):
                return inner

        agent = _Agent()
        stream = agent.invoke_stream("greet")
        with pytest.raises(KeyError):
            stream.throw(KeyError("stop"))
        assert agent.active_invocations == frozenset()


class TestStreamValidationAndFailures:
    @pytest.mark.parametrize("prompt", ["", "   "])
    def test_blank_prompt_rejected_at_call_time(self, echo_agent: EchoDevAgent, prompt: str) -> None:
        with pytest.raises(AgentError) as excinfo:
            echo_agent.invoke_stream(prompt)

        assert excinfo.value.code is ErrorCode.VALIDATION
        assert echo_agent.recorded_prompts == []
        assert echo_agent.active_invocations == frozenset()

    def test_backend_failure_mid_stream_is_unknown(self) -> None:
        class _Failing(EchoDevAgent):
            def _do_invoke_stream(self, prompt, options) -> Iterator[StreamChunk]:
                yield StreamChunk("partial")
                raise RuntimeError("connection reset")

        agent = _Failing()
        stream = agent.invoke_stream("greet")
        assert next(stream).text == "partial"

        with pytest.raises(AgentError) as excinfo:
            next(stream)

        assert excinfo.value.code is ErrorCode.UNKNOWN
        assert excinfo.value.message == "connection reset"
        assert isinstance(excinfo.value.cause, RuntimeError)
        assert agent.active_invocations == frozenset()

    def test_backend_failure_while_opening_stream(self) -> None:
        class _Broken(AbstractDevAgentPlugin):
            def _do_invoke_stream(self, prompt, options):
                raise ConnectionError("refused")

        agent = _Broken()
        with pytest.raises(AgentError) as excinfo:
            agent.invoke_stream("greet")

        assert excinfo.value.code is ErrorCode.UNKNOWN
        assert excinfo.value.message == "refused"
        assert agent.active_invocations == frozenset()

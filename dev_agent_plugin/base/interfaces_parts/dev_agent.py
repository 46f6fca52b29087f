"""DevAgent Protocol (single-class module).

Backend-agnostic contract for AI development agents: invoke with a prompt,
stream the response, cancel in-flight invocations, and describe capabilities.
"""

from __future__ import annotations

from typing import Iterator, Optional, Protocol, runtime_checkable

from ..models import AgentCapabilities, AgentResult, InvokeOptions, StreamChunk


@runtime_checkable
class DevAgent(Protocol):
    """Interface for AI development agents.

    Implementations raise :class:`~dev_agent_plugin.base.errors.AgentError`
    with one of the normalized codes:

    - ``VALIDATION``: invalid input (e.g. empty prompt)
    - ``TIMEOUT``: the invocation exceeded its timeout
    - ``CANCELLED``: cancelled via :meth:`cancel` or the caller's signal
    - ``UNKNOWN``: any other backend failure
    """

    def invoke(self, prompt: str, options: Optional[InvokeOptions] = None) -> AgentResult:
        """Invoke the agent and block until the complete result is available."""
        ...

    def invoke_stream(self, prompt: str, options: Optional[InvokeOptions] = None) -> Iterator[StreamChunk]:
        """Invoke the agent and return a single-pass iterator of chunks.

        Input validation fails immediately; every other failure is raised by
        the affected ``next()`` call.
        """
        ...

    def cancel(self, invocation_id: str) -> None:
        """Cancel an in-flight invocation; no-op for unknown or finished ids."""
        ...

    def get_capabilities(self) -> AgentCapabilities:
        """Return the static capability descriptor of this agent."""
        ...


__all__ = ["DevAgent"]

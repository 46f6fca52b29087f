"""
Backend-agnostic invocation models (public facade).

Dataclasses describing invocation options, results, stream chunks, and
capability descriptors. Implementations live under ``models_parts``.
"""

from .models_parts import (
    AgentCapabilities,
    AgentResult,
    InternalInvokeOptions,
    InvokeOptions,
    StreamChunk,
    TokenUsage,
)

__all__ = [
    "InvokeOptions",
    "InternalInvokeOptions",
    "AgentResult",
    "TokenUsage",
    "StreamChunk",
    "AgentCapabilities",
]

"""
Plugin Base Package

Exports the invocation lifecycle contracts, models, and primitives for agent
plugins:
- Interfaces: the ``DevAgent`` contract
- Models: options, results, stream chunks, capability descriptors
- Cancellation: cooperative tokens and the composite invocation signal
- Errors: the normalized four-code taxonomy
- Plugin: ``AbstractDevAgentPlugin``, the lifecycle-managing base class
"""

from .cancellation import (
    CancelReason,
    CancellationToken,
    CancelledError,
    CompositeSignal,
    compose_signals,
)
from .dto import AgentPluginParams
from .errors import AgentError, ErrorCode, normalize_error
from .interfaces import DevAgent
from .models import (
    AgentCapabilities,
    AgentResult,
    InternalInvokeOptions,
    InvokeOptions,
    StreamChunk,
    TokenUsage,
)
from .plugin import AbstractDevAgentPlugin
from .registry import InvocationRegistry, generate_invocation_id
from .streaming import InvocationStream
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
    "InvokeOptions",
    "InternalInvokeOptions",
    "AgentResult",
    "TokenUsage",
    "StreamChunk",
    "AgentCapabilities",
    # Interfaces
    "DevAgent",
    # Plugin
    "AbstractDevAgentPlugin",
    "AgentPluginParams",
    "InvocationRegistry",
    "generate_invocation_id",
    "InvocationStream",
    # Timeouts & Cancellation
    "TimeoutConfig",
    "get_timeout_config",
    "CancelReason",
    "CancellationToken",
    "CancelledError",
    "CompositeSignal",
    "compose_signals",
    # Errors
    "AgentError",
    "ErrorCode",
    "normalize_error",
]

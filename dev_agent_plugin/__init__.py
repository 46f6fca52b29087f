"""dev_agent_plugin package

Invocation lifecycle management for pluggable AI development agents.

Purpose:
    Concrete agents subclass :class:`AbstractDevAgentPlugin` and implement
    three backend hooks; the base class tracks each call under a unique id,
    enforces its timeout, composes manual, timeout, and caller-supplied
    cancellation into one signal, and normalizes every failure into
    :class:`AgentError` with one of four :class:`ErrorCode` values.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`AgentError`, :class:`ErrorCode`, :class:`CancelledError`
    - Base class: :class:`AbstractDevAgentPlugin`, :class:`AgentPluginParams`
    - Models: :class:`InvokeOptions`, :class:`InternalInvokeOptions`,
      :class:`AgentResult`, :class:`TokenUsage`, :class:`StreamChunk`,
      :class:`AgentCapabilities`
    - Cancellation: :class:`CancellationToken`, :class:`CancelReason`
    - Logging: :func:`configure_logger`
"""

from .base.cancellation import CancelReason, CancellationToken, CancelledError
from .base.dto import AgentPluginParams
from .base.errors import AgentError, ErrorCode
from .base.interfaces import DevAgent
from .base.logging import configure_logger
from .base.models import (
    AgentCapabilities,
    AgentResult,
    InternalInvokeOptions,
    InvokeOptions,
    StreamChunk,
    TokenUsage,
)
from .base.plugin import AbstractDevAgentPlugin
from .base.streaming import InvocationStream

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "AgentError",
    "ErrorCode",
    "CancelledError",
    # Core
    "DevAgent",
    "AbstractDevAgentPlugin",
    "AgentPluginParams",
    "InvocationStream",
    # Models
    "InvokeOptions",
    "InternalInvokeOptions",
    "AgentResult",
    "TokenUsage",
    "StreamChunk",
    "AgentCapabilities",
    # Cancellation
    "CancellationToken",
    "CancelReason",
    # Logging
    "configure_logger",
]


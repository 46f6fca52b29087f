"""Model parts package.

Single-class modules re-exported by ``dev_agent_plugin.base.models``.
"""

from .invoke_options import InvokeOptions
from .internal_invoke_options import InternalInvokeOptions
from .agent_result import AgentResult, TokenUsage
from .stream_chunk import StreamChunk
from .agent_capabilities import AgentCapabilities

__all__ = [
    "InvokeOptions",
    "InternalInvokeOptions",
    "AgentResult",
    "TokenUsage",
    "StreamChunk",
    "AgentCapabilities",
]

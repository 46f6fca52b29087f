"""
Static capability descriptor of an agent implementation.

Queried by consumers to adapt their behavior; never mutated by the plugin
layer.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class AgentCapabilities:
    """Describes what an agent implementation supports.

    Attributes:
        streaming: Whether ``invoke_stream`` produces incremental output.
        cancellation: Whether the backend honors the invocation signal.
        models: Model identifiers the agent can use; empty when the agent does
            not expose model selection.
    """

    streaming: bool
    cancellation: bool
    models: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "streaming": self.streaming,
            "cancellation": self.cancellation,
            "models": list(self.models),
        }


__all__ = ["AgentCapabilities"]

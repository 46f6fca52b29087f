"""
AgentResult DTO representing a completed single-shot invocation.

Produced once per successful ``invoke`` and handed to the caller unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class TokenUsage:
    """Token usage statistics; not every backend reports them."""

    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None


@dataclass
class AgentResult:
    """Result of a completed agent invocation.

    Attributes:
        output: Text output produced by the agent.
        invocation_id: Identifier assigned by the plugin layer; backends echo
            the id they received.
        usage: Optional token usage statistics.
    """

    output: str
    invocation_id: str
    usage: Optional[TokenUsage] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        return {
            "output": self.output,
            "invocation_id": self.invocation_id,
            "usage": asdict(self.usage) if self.usage else None,
        }


__all__ = ["AgentResult", "TokenUsage"]

"""Streaming output unit produced by backends."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class StreamChunk:
    """A chunk of streaming output from an invocation.

    ``metadata`` may carry tool-use markers, progress indicators, or other
    backend-specific data; the plugin layer never reads it.
    """

    text: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "metadata": dict(self.metadata)}


__all__ = ["StreamChunk"]

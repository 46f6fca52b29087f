"""Fired/unfired state shared by cancellation tokens and composite signals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class State:
    """Single-fire cancellation state.

    Mutated only under the owning token's lock. Once ``cancelled`` is set the
    ``reason`` is fixed; composite signals store a ``CancelReason`` here.
    """

    cancelled: bool = False
    reason: Optional[str] = None

    def fire(self, reason: Optional[str]) -> bool:
        """Mark cancelled with ``reason``; return ``False`` if already fired."""
        if self.cancelled:
            return False
        self.cancelled = True
        self.reason = reason
        return True


__all__ = ["State"]

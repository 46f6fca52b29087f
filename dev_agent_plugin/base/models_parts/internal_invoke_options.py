"""
Options handed to backend hooks.

Extends :class:`InvokeOptions` with the generated invocation identifier. The
``signal`` field carries the composite signal (timeout + manual cancel +
caller signal) instead of the caller's own token.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from ..cancellation import CompositeSignal
from .invoke_options import InvokeOptions


@dataclass(frozen=True, kw_only=True)
class InternalInvokeOptions(InvokeOptions):
    """Invocation options as seen by a backend.

    Backends must observe ``signal`` during long operations and echo
    ``invocation_id`` in their :class:`AgentResult`.
    """

    invocation_id: str
    signal: CompositeSignal

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["invocation_id"] = self.invocation_id
        return data


__all__ = ["InternalInvokeOptions"]

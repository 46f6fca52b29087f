"""Discriminated reasons exposed by a fired composite signal."""

from __future__ import annotations

from enum import Enum


class CancelReason(str, Enum):
    """Why a composite invocation signal fired.

    ``CANCELLED`` covers both manual ``cancel(invocation_id)`` and a fired
    caller-supplied signal.
    """

    TIMEOUT = "timeout"
    CANCELLED = "cancelled"


__all__ = ["CancelReason"]

"""Typed parameter object for agent plugin initialization.

Purpose
-------
Capture the construction-time settings shared by every agent plugin in a
small validated DTO, keeping constructor signatures short and carrying an
``extra`` bag for agent-specific fields.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and `.model_dump()` convenience.

Failure modes
-------------
- Pure data container. ``pydantic.ValidationError`` is raised for a
  non-positive or non-integer ``default_timeout_ms``; strict mode rejects
  ``bool`` and numeric strings, matching the per-call timeout check.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class AgentPluginParams(BaseModel):
    """Common agent plugin initialization parameters.

    Attributes
    ----------
    default_timeout_ms:
        Default invocation timeout in milliseconds. When unset, the
        environment/built-in default (30 000 ms) applies.
    agent_name:
        Logical agent name used in log context.
    extra:
        Free-form agent-specific configuration bag.
    """

    default_timeout_ms: Optional[int] = Field(default=None, gt=0, strict=True)
    agent_name: Optional[str] = None
    extra: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["AgentPluginParams"]

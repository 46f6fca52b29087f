"""
Agent-facing interfaces for the plugin layer.

Re-exports Protocols split into single-class modules under
``dev_agent_plugin.base.interfaces_parts`` while keeping imports stable.
"""

from __future__ import annotations

from .interfaces_parts import DevAgent

__all__ = ["DevAgent"]

"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `dev_agent_plugin.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .agent_error import AgentError
from .normalization import normalize_error, validation_error

__all__ = ["ErrorCode", "AgentError", "normalize_error", "validation_error"]

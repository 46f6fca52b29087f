"""Formatter and context helpers behind the ``dev_agent`` structured logger."""

from .json_formatter import JsonFormatter, ISO
from .logging_context import LogContext

__all__ = ["JsonFormatter", "ISO", "LogContext"]

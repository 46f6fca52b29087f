"""Single-class Protocol modules re-exported by ``base.interfaces``."""

from .dev_agent import DevAgent

__all__ = ["DevAgent"]

"""Streaming package for the plugin layer.

Exposes the lifecycle-aware stream wrapper handed to ``invoke_stream`` callers.
"""

from .invocation_stream import InvocationStream

__all__ = ["InvocationStream"]

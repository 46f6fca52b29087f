"""Mock agent package exposing a deterministic echo backend for tests."""

from .client import EchoDevAgent, chunk_text, echo_output

__all__ = ["EchoDevAgent", "echo_output", "chunk_text"]

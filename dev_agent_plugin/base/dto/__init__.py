"""DTO validation package for the plugin layer."""

from .plugin_params import AgentPluginParams

__all__ = ["AgentPluginParams"]

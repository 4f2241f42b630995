"""Extension layer — renderer plugins via pluggy."""

from kubeviz.plugins.manager import PluginManager

__all__ = ["PluginManager"]

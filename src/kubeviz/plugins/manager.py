"""Plugin discovery and renderer registry.

Discovery: the built-in renderer plugin plus anything installed under the
``kubeviz.plugins`` entry point group.
INVARIANT: a broken third-party plugin is logged and skipped, never fatal.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from kubeviz.plugins.hookspecs import KubevizHookSpec

if TYPE_CHECKING:
    from kubeviz.renderers.base import Renderer

PROJECT_NAME = "kubeviz"
ENTRY_POINT_GROUP = "kubeviz.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Loads plugins and collects the renderers they provide."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(KubevizHookSpec)
        self._loaded = False

    def discover_and_load(self, *, entry_points: bool = True) -> list[str]:
        """Register built-ins, then entry-point plugins. Returns plugin names."""
        from kubeviz.plugins.builtins.renderers import BuiltinRenderersPlugin

        if not self._pm.has_plugin("builtin-renderers"):
            self.register_plugin(BuiltinRenderersPlugin(), name="builtin-renderers")
        if entry_points:
            try:
                self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
            except Exception:
                logger.warning("Failed to load entry-point plugins", exc_info=True)
            self._normalize_plugin_instances()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def renderers(self) -> dict[str, Renderer]:
        """Collect renderers by name. The first plugin to claim a name keeps it."""
        if not self._loaded:
            self.discover_and_load()
        registry: dict[str, Renderer] = {}
        # pluggy calls later-registered plugins first; reverse so built-ins win.
        for batch in reversed(self._pm.hook.kubeviz_renderers()):
            for renderer in batch or []:
                name = getattr(renderer, "name", None)
                if not name or not callable(getattr(renderer, "render", None)):
                    logger.warning("Ignoring invalid renderer %r", renderer)
                    continue
                registry.setdefault(str(name), renderer)
        return registry

    def _normalize_plugin_instances(self) -> None:
        """Replace plugin classes registered by entry points with instances."""
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning("Failed to instantiate plugin %s", plugin_name, exc_info=True)
                continue
            self._pm.register(instance, name=plugin_name)

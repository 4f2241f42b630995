"""Pluggy hook specifications for kubeviz extensions.

Plugins contribute render backends; every registered renderer becomes a
``--format`` choice.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from kubeviz.renderers.base import Renderer

hookspec = pluggy.HookspecMarker("kubeviz")
hookimpl = pluggy.HookimplMarker("kubeviz")


class KubevizHookSpec:
    """Hook specifications for the kubeviz plugin system."""

    @hookspec
    def kubeviz_renderers(self) -> list[Renderer]:
        """Return renderer instances provided by this plugin."""

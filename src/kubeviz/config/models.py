"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``kubeviz.toml`` only holds
overrides. An empty file (or no file) is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Direction = Literal["TD", "TB", "BT", "LR", "RL"]


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    default_format: str = "mermaid"
    direction: Direction = "TD"
    fenced: bool = False
    title: str = "Kubernetes Resource Graph"


class LayoutConfig(BaseModel):
    """[layout] section — interactive backends only."""

    model_config = {"frozen": True}

    spacing_factor: float = Field(default=1.5, gt=0)
    padding: int = Field(default=30, ge=0)


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    max_expanded_replicas: int = Field(default=5, ge=0)


class ShareConfig(BaseModel):
    """[share] section."""

    model_config = {"frozen": True}

    base_url: str = "https://kubeviz.dev/"
    param: str = "yaml"


class ClipboardConfig(BaseModel):
    """[clipboard] section."""

    model_config = {"frozen": True}

    enabled: bool = True

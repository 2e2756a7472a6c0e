"""FastAPI dependency injection."""

from __future__ import annotations

from sankeysight.config import Settings, settings
from sankeysight.engine.config import LayoutConfig


def get_settings() -> Settings:
    return settings


def get_layout_config() -> LayoutConfig:
    return LayoutConfig(arc_samples=settings.sankeysight_arc_samples)

"""Configuration for Pocket Surf."""

from pocketsurf.config.settings import DisplaySettings, HudSettings, Settings, get_settings

__all__ = ["DisplaySettings", "HudSettings", "Settings", "get_settings"]

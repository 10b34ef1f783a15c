"""Configuration for the runner."""

from .settings import (
    DisplaySettings,
    PlayerSettings,
    Settings,
    SpawnSettings,
    SpeedSettings,
    WorldSettings,
    get_settings,
)

__all__ = [
    "DisplaySettings",
    "PlayerSettings",
    "Settings",
    "SpawnSettings",
    "SpeedSettings",
    "WorldSettings",
    "get_settings",
]

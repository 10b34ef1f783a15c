"""
Game settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Every gameplay constant lives here so tests and players can tune it
without touching the simulation code.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlayerSettings(BaseSettings):
    """Player geometry and jump physics."""

    model_config = SettingsConfigDict(env_prefix="TREX_PLAYER_", extra="ignore")

    x: float = 50.0
    y: float = 200.0  # Ground reference for the player's top edge
    width: float = Field(default=40.0, gt=0)
    height: float = Field(default=40.0, gt=0)
    duck_height: float = Field(default=20.0, gt=0)

    # Inset applied to every side of the player's hitbox
    hitbox_margin: float = Field(default=5.0, ge=0)

    # Jump impulse
    jump_velocity: float = Field(default=20.0, gt=0)
    gravity: float = Field(default=0.6, gt=0)
    jump_interval_ms: float = Field(default=20.0, gt=0)

    @model_validator(mode="after")
    def _check_jump(self) -> "PlayerSettings":
        if self.gravity >= self.jump_velocity:
            raise ValueError("gravity must be smaller than jump_velocity")
        if self.duck_height > self.height:
            raise ValueError("duck_height must not exceed height")
        if 2 * self.hitbox_margin >= min(self.width, self.duck_height):
            raise ValueError("hitbox_margin leaves no hitbox")
        return self


class SpeedSettings(BaseSettings):
    """Scroll speed and the difficulty ramp."""

    model_config = SettingsConfigDict(env_prefix="TREX_SPEED_", extra="ignore")

    base: float = Field(default=5.0, gt=0)
    increment: float = Field(default=0.5, ge=0)
    maximum: float = Field(default=12.0, gt=0)
    ramp_every_ticks: int = Field(default=500, gt=0)

    @model_validator(mode="after")
    def _check_cap(self) -> "SpeedSettings":
        if self.maximum < self.base:
            raise ValueError("maximum speed must be at least the base speed")
        return self


class SpawnSettings(BaseSettings):
    """Spawn gates and entity geometry."""

    model_config = SettingsConfigDict(env_prefix="TREX_SPAWN_", extra="ignore")

    spawn_x: float = 800.0

    obstacle_interval_ms: float = Field(default=2000.0, gt=0)
    small_width: float = 20.0
    small_height: float = 40.0
    small_y: float = 200.0
    large_width: float = 30.0
    large_height: float = 60.0
    large_y: float = 180.0

    cloud_interval_ms: float = Field(default=3000.0, gt=0)
    cloud_width: float = 60.0
    cloud_height: float = 30.0
    cloud_y_min: float = 50.0
    cloud_y_range: float = Field(default=100.0, ge=0)
    cloud_speed_min: float = Field(default=1.0, gt=0)
    cloud_speed_range: float = Field(default=2.0, ge=0)


class WorldSettings(BaseSettings):
    """Playfield bounds."""

    model_config = SettingsConfigDict(env_prefix="TREX_WORLD_", extra="ignore")

    width: int = 800
    height: int = 400

    # Entities at or left of these x positions are dropped
    obstacle_cleanup_x: float = -50.0
    cloud_cleanup_x: float = -100.0


class DisplaySettings(BaseSettings):
    """Simulator window settings."""

    model_config = SettingsConfigDict(env_prefix="TREX_DISPLAY_", extra="ignore")

    title: str = "No Internet Connection"
    fps: int = Field(default=60, gt=0)
    scale: int = Field(default=1, ge=1)
    fullscreen: bool = False


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TREX_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False

    # None means a fresh seed every run
    seed: Optional[int] = None

    # Simulation clock
    tick_rate: float = Field(default=60.0, gt=0)
    max_ticks_per_frame: int = Field(default=5, gt=0)

    # Nested settings
    player: PlayerSettings = Field(default_factory=PlayerSettings)
    speed: SpeedSettings = Field(default_factory=SpeedSettings)
    spawn: SpawnSettings = Field(default_factory=SpawnSettings)
    world: WorldSettings = Field(default_factory=WorldSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @property
    def tick_ms(self) -> float:
        """Length of one simulation tick in milliseconds."""
        return 1000.0 / self.tick_rate


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

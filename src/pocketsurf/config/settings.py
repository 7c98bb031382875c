"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplaySettings(BaseModel):
    """Playfield and window settings."""

    # Playfield buffer (the drawing surface the renderer writes)
    width: int = Field(default=480, ge=64)
    height: int = Field(default=270, ge=64)

    # Window
    scale: int = Field(default=2, ge=1, le=6)
    fps: int = Field(default=60, ge=1)
    fullscreen: bool = False


class HudSettings(BaseModel):
    """Thresholds for the descriptive HUD labels.

    These only drive the text shown to the player and are unrelated to the
    barrel threshold used by the wave geometry.
    """

    pocket_wide: float = 58.0    # pocket above this reads "Wide"
    pocket_tight: float = 44.0   # pocket above this reads "Tight", else "Barrel"
    speed_cruise: float = 32.0   # speed below this reads "Cruise"
    speed_fast: float = 40.0     # speed below this reads "Fast", else "Turbo"


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="POCKETSURF_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False
    title: str = "Pocket Surf"

    # Paths
    assets_path: Path = Field(default_factory=lambda: Path.cwd() / "assets")
    sprite_file: str = "surfer-sprite.png"
    log_file: Path = Field(default_factory=lambda: Path.cwd() / "pocketsurf.log")

    # Nested settings
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    hud: HudSettings = Field(default_factory=HudSettings)

    @property
    def sprite_path(self) -> Path:
        """Path to the surfer sprite sheet."""
        return self.assets_path / self.sprite_file


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""Per-level ride tuning.

Every number here is derived from the level index alone, so two rides on the
same level always feel identical. The HUD labels read the same settings but
use their own thresholds (see ``pocketsurf.config.settings.HudSettings``).
"""

from dataclasses import dataclass


MIN_POCKET = 34.0


@dataclass(frozen=True)
class LevelSettings:
    """Immutable tuning for one level."""

    duration: float        # seconds to clear the level
    amplitude: float       # swell height (px)
    pocket: float          # tube width baseline (px)
    speed: float           # scroll units per second
    turbulence: float      # chop magnitude (px)
    gravity: float = 140.0
    suction: float = 110.0
    pump_velocity: float = -140.0
    margin: float = 6.0
    barrel_threshold: float = 0.75


def level_settings(level: int) -> LevelSettings:
    """Build the settings for ``level`` (1-based)."""
    if level < 1:
        raise ValueError(f"Level must be >= 1, got {level}")

    return LevelSettings(
        duration=12.0 + (level - 1) * 6.0,
        amplitude=16.0 + level * 4.0,
        pocket=max(MIN_POCKET, 74.0 - level * 6.0),
        speed=26.0 + level * 4.0,
        turbulence=min(8.0, 2.0 + level * 0.8),
    )


def pocket_label(pocket: float, wide: float = 58.0, tight: float = 44.0) -> str:
    if pocket > wide:
        return "Wide"
    if pocket > tight:
        return "Tight"
    return "Barrel"


def speed_label(speed: float, cruise: float = 32.0, fast: float = 40.0) -> str:
    if speed < cruise:
        return "Cruise"
    if speed < fast:
        return "Fast"
    return "Turbo"

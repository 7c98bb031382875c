"""Ride simulation: levels, wave field and surfer physics.

The rules (``pocketsurf.game.ride``) and the session orchestrator
(``pocketsurf.game.session``) depend on ``pocketsurf.core`` and are imported
from their own modules.
"""

from pocketsurf.game.levels import LevelSettings, level_settings, pocket_label, speed_label
from pocketsurf.game.wave import Playfield, WaveField, WaveRow, WaveSample, sample_wave
from pocketsurf.game.surfer import SurferBody

__all__ = [
    "LevelSettings",
    "level_settings",
    "pocket_label",
    "speed_label",
    "Playfield",
    "WaveField",
    "WaveRow",
    "WaveSample",
    "sample_wave",
    "SurferBody",
]

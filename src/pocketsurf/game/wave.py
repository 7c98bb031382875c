"""Procedural wave field.

The wave is closed-form: three sinusoids at different rates make the swell,
the chop and the barrel pulse. Nothing is cached between frames, so any
(x, scroll) pair can be sampled at any time and always gives the same answer.
"""

import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from pocketsurf.game.levels import LevelSettings


BASELINE_RATIO = 0.55
START_X_RATIO = 0.28
EXIT_OVERSHOOT = 20.0

PHASE_SCALE = 54.0
CHOP_SCALE = 18.0
CHOP_RATE = 1.3
BARREL_SCALE = 120.0
BARREL_NARROWING = 0.6
LIP_BUFFER = 4.0


@dataclass(frozen=True)
class WaveSample:
    """Wave geometry at a single horizontal position."""

    center: float
    pocket: float
    upper: float
    lower: float
    barrel: bool


@dataclass(frozen=True)
class WaveRow:
    """Wave geometry across the playfield, one entry per sampled column."""

    xs: NDArray[np.float64]
    upper: NDArray[np.float64]
    lower: NDArray[np.float64]
    center: NDArray[np.float64]
    barrel: NDArray[np.bool_]

    def __len__(self) -> int:
        return len(self.xs)


def sample_wave(
    x: float,
    scroll_time: float,
    settings: LevelSettings,
    baseline_y: float,
) -> WaveSample:
    """Sample the wave at ``x`` for the given scroll offset."""
    phase = (x + scroll_time) / PHASE_SCALE
    chop = math.sin((x + scroll_time * CHOP_RATE) / CHOP_SCALE) * settings.turbulence
    swell = math.sin(phase) * settings.amplitude
    center = baseline_y + swell + chop

    barrel_pulse = (math.sin((x + scroll_time) / BARREL_SCALE) + 1.0) / 2.0
    barrel_factor = BARREL_NARROWING if barrel_pulse > settings.barrel_threshold else 1.0
    pocket = settings.pocket * barrel_factor

    return WaveSample(
        center=center,
        pocket=pocket,
        upper=center - pocket / 2.0 - LIP_BUFFER,
        lower=center + pocket / 2.0 + LIP_BUFFER,
        barrel=barrel_factor < 1.0,
    )


@dataclass(frozen=True)
class WaveField:
    """Wave sampler bound to a fixed baseline."""

    baseline_y: float

    def sample(self, x: float, scroll_time: float, settings: LevelSettings) -> WaveSample:
        return sample_wave(x, scroll_time, settings, self.baseline_y)

    def sample_row(
        self,
        width: float,
        scroll_time: float,
        settings: LevelSettings,
        step: int = 6,
    ) -> WaveRow:
        """Sample every ``step`` pixels from 0 up to and including ``width``.

        Vectorised version of :meth:`sample` used by the renderer.
        """
        xs = np.arange(0, width + 1, step, dtype=np.float64)

        phase = (xs + scroll_time) / PHASE_SCALE
        chop = np.sin((xs + scroll_time * CHOP_RATE) / CHOP_SCALE) * settings.turbulence
        swell = np.sin(phase) * settings.amplitude
        center = self.baseline_y + swell + chop

        barrel_pulse = (np.sin((xs + scroll_time) / BARREL_SCALE) + 1.0) / 2.0
        barrel = barrel_pulse > settings.barrel_threshold
        pocket = settings.pocket * np.where(barrel, BARREL_NARROWING, 1.0)

        return WaveRow(
            xs=xs,
            upper=center - pocket / 2.0 - LIP_BUFFER,
            lower=center + pocket / 2.0 + LIP_BUFFER,
            center=center,
            barrel=barrel,
        )


@dataclass(frozen=True)
class Playfield:
    """Drawing surface geometry shared by the simulation and the renderer."""

    width: int
    height: int
    wave_field: WaveField = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "wave_field", WaveField(self.baseline_y))

    @property
    def baseline_y(self) -> float:
        return self.height * BASELINE_RATIO

    @property
    def start_x(self) -> float:
        return self.width * START_X_RATIO

    @property
    def start_y(self) -> float:
        return self.baseline_y

    @property
    def exit_x(self) -> float:
        """Surfer x past which a celebration hands over to the next level."""
        return self.width + EXIT_OVERSHOOT

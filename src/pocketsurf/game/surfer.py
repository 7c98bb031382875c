"""Surfer body: a point with vertical velocity."""

from dataclasses import dataclass

from pocketsurf.game.levels import LevelSettings
from pocketsurf.game.wave import WaveSample


@dataclass
class SurferBody:
    x: float = 0.0
    y: float = 0.0
    velocity: float = 0.0

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def reset(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.velocity = 0.0

    def integrate(self, wave: WaveSample, settings: LevelSettings, dt: float) -> None:
        """Advance one step under gravity and the pocket's suction.

        Suction pulls toward the wave center, scaled by how far off-center the
        surfer sits relative to the pocket width.
        """
        suction = ((wave.center - self.y) / wave.pocket) * settings.suction
        self.velocity += (settings.gravity + suction) * dt
        self.y += self.velocity * dt

    def pump(self, settings: LevelSettings) -> None:
        # Override, not an added force
        self.velocity = settings.pump_velocity

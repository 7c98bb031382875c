"""
State machine for a Pocket Surf session.

States:
    READY: Waiting for the player to start the ride
    RUNNING: Surfer is riding the wave
    WIPEOUT: Surfer left the pocket, waiting for retry
    CELEBRATE: Level cleared, surfer paddles off-screen before the next level
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Callable
import logging

from pocketsurf.game.levels import LevelSettings, level_settings
from pocketsurf.game.surfer import SurferBody

logger = logging.getLogger(__name__)


class Status(Enum):
    """Ride states."""
    READY = "ready"
    RUNNING = "running"
    WIPEOUT = "wipeout"
    CELEBRATE = "celebrate"

    @property
    def label(self) -> str:
        """Human-readable status for the HUD."""
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    Status.READY: "Ready",
    Status.RUNNING: "Riding",
    Status.WIPEOUT: "Wipeout",
    Status.CELEBRATE: "Shaka",
}


@dataclass
class GameState:
    """Everything that changes during a session.

    Created once at startup and mutated in place by every tick.
    """
    status: Status = Status.READY
    level: int = 1
    timer: float = 0.0
    score: float = 0.0
    scroll: float = 0.0
    barrel_bonus: float = 0.0
    last_timestamp: float | None = None
    surfer: SurferBody = field(default_factory=SurferBody)
    settings: LevelSettings = field(default_factory=lambda: level_settings(1))


Listener = Callable[[Status, Status, GameState], None]


class StateMachine:
    """
    Guards status changes on a GameState.

    Only the transitions in VALID_TRANSITIONS are allowed; listeners are
    notified synchronously after each successful change.
    """

    VALID_TRANSITIONS: list[tuple[Status, Status]] = [
        (Status.READY, Status.RUNNING),

        (Status.RUNNING, Status.WIPEOUT),
        (Status.RUNNING, Status.CELEBRATE),

        (Status.WIPEOUT, Status.READY),  # Retry

        # Celebration rolls straight into the next level
        (Status.CELEBRATE, Status.RUNNING),
    ]

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state or GameState()
        self._listeners: list[Listener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine initialized with status: {self._state.status.name}")

    @property
    def state(self) -> GameState:
        """Get the owned game state."""
        return self._state

    @property
    def status(self) -> Status:
        """Get current status."""
        return self._state.status

    def can_transition(self, to_status: Status) -> bool:
        """Check if transition to given status is valid."""
        return (self._state.status, to_status) in self._valid_transitions

    def transition(self, to_status: Status) -> bool:
        """
        Attempt to move to a new status.

        Args:
            to_status: Target status

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_status):
            logger.warning(
                f"Invalid transition: {self._state.status.name} -> {to_status.name}"
            )
            return False

        old_status = self._state.status
        self._state.status = to_status

        logger.info(
            f"Status transition: {old_status.name} -> {to_status.name} "
            f"(level {self._state.level})"
        )

        for listener in list(self._listeners):
            try:
                listener(old_status, to_status, self._state)
            except Exception:
                logger.exception("Error in status listener")

        return True

    def add_listener(self, callback: Listener) -> None:
        """Add a status change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        """Remove a status change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)

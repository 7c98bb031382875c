"""Ride session: connects the rules to the frame loop and the UI surfaces."""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from pocketsurf.config.settings import HudSettings
from pocketsurf.core.events import Event, EventBus, EventType
from pocketsurf.core.state import GameState, StateMachine, Status
from pocketsurf.game import ride
from pocketsurf.game.levels import pocket_label, speed_label
from pocketsurf.game.wave import Playfield

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Prompt:
    """Message box shown over the playfield."""

    title: str
    body: str
    button_label: str
    disabled: bool = False


READY_PROMPT = Prompt(
    "Tap to start the ride",
    "Stay between the lip and the whitewater.",
    "Start ride",
)
WIPEOUT_PROMPT = Prompt(
    "Wipeout!",
    "Tap to retry and stay in the pocket.",
    "Retry",
)
CELEBRATE_PROMPT = Prompt(
    "Shaka!",
    "Level cleared. Bigger wave loading...",
    "Keep riding",
    disabled=True,
)

_PROMPTS = {
    Status.READY: READY_PROMPT,
    Status.WIPEOUT: WIPEOUT_PROMPT,
    Status.CELEBRATE: CELEBRATE_PROMPT,
    Status.RUNNING: None,
}


@dataclass(frozen=True)
class HudSnapshot:
    """Values shown in the HUD panel for the current frame."""

    level: int
    timer: str
    score: int
    status: str
    pocket: str
    speed: str


class RideSession:
    """Owns the game state for the lifetime of the window.

    Subscribes to ACTION, TICK and SHUTDOWN on the event bus and re-emits
    ride events (status changes, wipeouts, level clears) for anything else
    listening. SHUTDOWN detaches the session.
    """

    def __init__(
        self,
        playfield: Playfield,
        event_bus: Optional[EventBus] = None,
        hud_settings: Optional[HudSettings] = None,
    ) -> None:
        self.playfield = playfield
        self.event_bus = event_bus or EventBus()
        self.hud_settings = hud_settings or HudSettings()

        self.machine = StateMachine(ride.new_game(playfield))
        self.machine.add_listener(self._on_status_changed)

        self._prompt: Optional[Prompt] = READY_PROMPT
        self._unsubscribers = [
            self.event_bus.subscribe(EventType.ACTION, self._on_action),
            self.event_bus.subscribe(EventType.TICK, self._on_tick),
            self.event_bus.subscribe(EventType.SHUTDOWN, self._on_shutdown),
        ]

        logger.info(f"RideSession created on {playfield.width}x{playfield.height} playfield")

    @property
    def state(self) -> GameState:
        return self.machine.state

    @property
    def prompt(self) -> Optional[Prompt]:
        """Current message box, or None while riding."""
        return self._prompt

    def handle_action(self) -> Optional[str]:
        effect = ride.handle_action(self.machine, self.playfield)
        if effect == "pump":
            self.event_bus.emit(Event(
                EventType.PUMP,
                data={"score": self.state.score},
                source="session",
            ))
        return effect

    def update(self, timestamp_ms: float) -> float:
        """Advance one frame given the host's frame timestamp.

        Returns the clamped delta that was simulated.
        """
        state = self.state
        dt = ride.clamp_dt(state.last_timestamp, timestamp_ms)
        state.last_timestamp = timestamp_ms
        ride.step(self.machine, dt, self.playfield)
        return dt

    def hud(self) -> HudSnapshot:
        state = self.state
        hud = self.hud_settings
        return HudSnapshot(
            level=state.level,
            timer=f"{state.timer:.1f}s",
            score=int(math.floor(state.score)),
            status=state.status.label,
            pocket=pocket_label(state.settings.pocket, hud.pocket_wide, hud.pocket_tight),
            speed=speed_label(state.settings.speed, hud.speed_cruise, hud.speed_fast),
        )

    def close(self) -> None:
        """Detach from the event bus. Safe to call more than once."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
        self.machine.remove_listener(self._on_status_changed)

    def _on_action(self, event: Event) -> None:
        self.handle_action()

    def _on_tick(self, event: Event) -> None:
        self.update(event.data["timestamp"])

    def _on_shutdown(self, event: Event) -> None:
        logger.info(f"Session closed at level {self.state.level}, score {self.state.score:.0f}")
        self.close()

    def _on_status_changed(self, old: Status, new: Status, state: GameState) -> None:
        self._prompt = _PROMPTS[new]

        self.event_bus.emit(Event(
            EventType.STATUS_CHANGED,
            data={"old": old, "new": new},
            source="session",
        ))

        if new == Status.WIPEOUT:
            logger.info(f"Wipeout on level {state.level} at {state.timer:.1f}s")
            self.event_bus.emit(Event(
                EventType.WIPEOUT,
                data={"level": state.level, "timer": state.timer},
                source="session",
            ))
        elif new == Status.CELEBRATE:
            logger.info(f"Level {state.level} cleared, score {state.score:.0f}")
            self.event_bus.emit(Event(
                EventType.LEVEL_CLEARED,
                data={
                    "level": state.level,
                    "barrel_bonus": state.barrel_bonus,
                    "score": state.score,
                },
                source="session",
            ))
        elif new == Status.RUNNING:
            self.event_bus.emit(Event(
                EventType.LEVEL_STARTED,
                data={"level": state.level},
                source="session",
            ))

"""Ride rules.

Plain functions over a :class:`StateMachine` and its :class:`GameState`.
Nothing here touches a window or a pixel buffer, so a whole session can be
played out deterministically in tests by feeding ``step`` fixed deltas.
"""

import logging

from pocketsurf.core.state import GameState, StateMachine, Status
from pocketsurf.game.levels import level_settings
from pocketsurf.game.wave import Playfield, WaveSample

logger = logging.getLogger(__name__)


MAX_DT = 0.05
SCROLL_RATE = 12.0
CELEBRATE_SCROLL_RATE = 4.0
CELEBRATE_DRIFT_X = 40.0
CELEBRATE_RISE_Y = 20.0

POCKET_CENTER_FRACTION = 0.2
CENTERED_SCORE_RATE = 12.0
LOOSE_SCORE_RATE = 8.0
PUMP_SCORE = 4.0
CLEAR_BONUS = 20.0
BARREL_BONUS_RATE = 6.0


def new_game(playfield: Playfield) -> GameState:
    """Fresh session state: ready, level 1, no score, level already laid out."""
    state = GameState()
    reset_level(state, playfield)
    return state


def reset_level(state: GameState, playfield: Playfield) -> None:
    """Reset the per-level counters and put the surfer back at the start."""
    state.timer = 0.0
    state.scroll = 0.0
    state.barrel_bonus = 0.0
    state.settings = level_settings(state.level)
    state.surfer.reset(playfield.start_x, playfield.start_y)
    logger.debug(f"Level {state.level} reset: {state.settings}")


def clamp_dt(last_ms: float | None, now_ms: float) -> float:
    """Seconds between two frame timestamps, clamped to [0, MAX_DT]."""
    if last_ms is None:
        return 0.0
    return min(MAX_DT, max(0.0, (now_ms - last_ms) / 1000.0))


def leaves_pocket(y: float, wave: WaveSample, margin: float) -> bool:
    """True when ``y`` is past the lip or the whitewater (margin included)."""
    return y < wave.upper + margin or y > wave.lower - margin


def score_rate(y: float, wave: WaveSample) -> float:
    """Points per second for riding at ``y``."""
    if abs(y - wave.center) < wave.pocket * POCKET_CENTER_FRACTION:
        return CENTERED_SCORE_RATE
    return LOOSE_SCORE_RATE


# Player actions

def start_ride(machine: StateMachine, playfield: Playfield) -> bool:
    """Start a new ride from level 1 with no score."""
    state = machine.state
    if state.status != Status.READY:
        return False

    state.level = 1
    state.score = 0.0
    reset_level(state, playfield)
    return machine.transition(Status.RUNNING)


def pump(machine: StateMachine) -> bool:
    state = machine.state
    if state.status != Status.RUNNING:
        return False

    state.surfer.pump(state.settings)
    state.score += PUMP_SCORE
    return True


def retry(machine: StateMachine, playfield: Playfield) -> bool:
    """Back to ready on the same level.

    Level and score stay as they were until the next start resets them.
    """
    state = machine.state
    if state.status != Status.WIPEOUT:
        return False

    reset_level(state, playfield)
    return machine.transition(Status.READY)


def handle_action(machine: StateMachine, playfield: Playfield) -> str | None:
    """Apply the single player action according to the current status.

    Returns the name of the effect applied, or None when the action is
    ignored (during a celebration).
    """
    status = machine.status
    if status == Status.READY and start_ride(machine, playfield):
        return "start"
    if status == Status.RUNNING and pump(machine):
        return "pump"
    if status == Status.WIPEOUT and retry(machine, playfield):
        return "retry"
    return None


# Automatic transitions

def clear_level(machine: StateMachine) -> float:
    """Pay out the level bonus and start the celebration.

    Returns the bonus awarded.
    """
    state = machine.state
    bonus = CLEAR_BONUS + state.barrel_bonus * BARREL_BONUS_RATE
    state.score += bonus
    machine.transition(Status.CELEBRATE)
    return bonus


def advance_level(machine: StateMachine, playfield: Playfield) -> None:
    state = machine.state
    state.level += 1
    reset_level(state, playfield)
    machine.transition(Status.RUNNING)


def step(machine: StateMachine, dt: float, playfield: Playfield) -> GameState:
    """Advance the simulation by ``dt`` seconds.

    Only RUNNING and CELEBRATE move anything; READY and WIPEOUT are frozen.
    """
    state = machine.state

    if state.status == Status.RUNNING:
        _ride(machine, dt, playfield)
    elif state.status == Status.CELEBRATE:
        _celebrate(machine, dt, playfield)

    return state


def _ride(machine: StateMachine, dt: float, playfield: Playfield) -> None:
    state = machine.state
    settings = state.settings
    surfer = state.surfer

    state.timer += dt
    state.scroll += settings.speed * dt * SCROLL_RATE

    wave = playfield.wave_field.sample(surfer.x, state.scroll, settings)
    surfer.integrate(wave, settings, dt)

    state.score += dt * score_rate(surfer.y, wave)
    if wave.barrel:
        state.barrel_bonus += dt

    if leaves_pocket(surfer.y, wave, settings.margin):
        machine.transition(Status.WIPEOUT)
        return

    if state.timer >= settings.duration:
        clear_level(machine)


def _celebrate(machine: StateMachine, dt: float, playfield: Playfield) -> None:
    state = machine.state
    state.scroll += state.settings.speed * dt * CELEBRATE_SCROLL_RATE
    state.surfer.x += dt * CELEBRATE_DRIFT_X
    state.surfer.y -= dt * CELEBRATE_RISE_Y

    if state.surfer.x > playfield.exit_x:
        advance_level(machine, playfield)

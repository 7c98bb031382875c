"""Shared fixtures for Pocket Surf tests."""
from __future__ import annotations

import os

# Headless pygame for window tests; must be set before pygame opens a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from pocketsurf.core.events import EventBus
from pocketsurf.core.state import StateMachine, Status
from pocketsurf.game import ride
from pocketsurf.game.session import RideSession
from pocketsurf.game.wave import Playfield


@pytest.fixture
def playfield() -> Playfield:
    return Playfield(480, 270)


@pytest.fixture
def machine(playfield: Playfield) -> StateMachine:
    return StateMachine(ride.new_game(playfield))


@pytest.fixture
def running(machine: StateMachine, playfield: Playfield) -> StateMachine:
    assert ride.start_ride(machine, playfield)
    assert machine.status == Status.RUNNING
    return machine


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def session(playfield: Playfield, bus: EventBus) -> RideSession:
    return RideSession(playfield, event_bus=bus)


def center_surfer(machine: StateMachine, playfield: Playfield, scroll: float | None = None) -> None:
    """Put the surfer on the wave center line at ``scroll`` with no velocity."""
    state = machine.state
    if scroll is None:
        scroll = state.scroll
    wave = playfield.wave_field.sample(state.surfer.x, scroll, state.settings)
    state.surfer.y = wave.center
    state.surfer.velocity = 0.0

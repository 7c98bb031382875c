"""Core framework components for Pocket Surf."""

from .state import Status, GameState, StateMachine
from .events import EventBus, Event, EventType

__all__ = ["Status", "GameState", "StateMachine", "EventBus", "Event", "EventType"]

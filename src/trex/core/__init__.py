"""Core framework components for the runner."""

from .state import GamePhase, StateMachine
from .events import EventBus, Event, EventType

__all__ = ["GamePhase", "StateMachine", "EventBus", "Event", "EventType"]

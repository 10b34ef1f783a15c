"""
State machine for the runner's game flow.

States:
    NOT_STARTED: Title screen, waiting for the start key
    RUNNING: A round is being simulated
    OVER: The player hit an obstacle; waiting for restart
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Game phases."""
    NOT_STARTED = auto()
    RUNNING = auto()
    OVER = auto()


Listener = Callable[[GamePhase, GamePhase], None]


class StateMachine:
    """
    Manages the game phase and its transitions.

    Only the transitions in VALID_TRANSITIONS are allowed; anything else
    is refused and logged.
    """

    VALID_TRANSITIONS: list[tuple[GamePhase, GamePhase]] = [
        (GamePhase.NOT_STARTED, GamePhase.RUNNING),
        (GamePhase.RUNNING, GamePhase.OVER),
        (GamePhase.OVER, GamePhase.RUNNING),  # Restart
    ]

    def __init__(self, initial_phase: GamePhase = GamePhase.NOT_STARTED) -> None:
        self._phase = initial_phase
        self._listeners: list[Listener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.info(f"StateMachine initialized with phase: {initial_phase.name}")

    @property
    def phase(self) -> GamePhase:
        """Get current phase."""
        return self._phase

    @property
    def is_running(self) -> bool:
        return self._phase == GamePhase.RUNNING

    def can_transition(self, to_phase: GamePhase) -> bool:
        """Check if transition to given phase is valid."""
        return (self._phase, to_phase) in self._valid_transitions

    def transition(self, to_phase: GamePhase) -> bool:
        """
        Attempt to transition to a new phase.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_phase):
            logger.warning(
                f"Invalid transition: {self._phase.name} -> {to_phase.name}"
            )
            return False

        old_phase = self._phase
        self._phase = to_phase

        logger.info(f"Phase transition: {old_phase.name} -> {to_phase.name}")

        for listener in list(self._listeners):
            try:
                listener(old_phase, to_phase)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")

        return True

    def add_listener(self, callback: Listener) -> None:
        """Add a phase change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        """Remove a phase change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)

"""Base class for game modes."""

from abc import ABC, abstractmethod
from typing import List
from dataclasses import dataclass
import logging

from trex.config.settings import Settings
from trex.core.events import Event, EventBus

logger = logging.getLogger(__name__)


@dataclass
class ModeContext:
    """Shared context passed to modes."""

    settings: Settings
    event_bus: EventBus


class BaseMode(ABC):
    """Abstract base class for game modes.

    Lifecycle:
        1. on_enter() - Initialize mode
        2. on_update(delta) - Per-frame logic while active
        3. on_input(event) - Handle user input
        4. on_exit() - Cleanup
    """

    # Mode metadata (override in subclasses)
    name: str = "base"
    display_name: str = "Base Mode"

    def __init__(self, context: ModeContext):
        self.context = context
        self._active = False
        self._time_in_mode: float = 0.0

        logger.debug(f"Mode created: {self.name}")

    @property
    def is_active(self) -> bool:
        """Check if mode is currently active."""
        return self._active

    @property
    def time_in_mode(self) -> float:
        """Milliseconds since the mode was entered."""
        return self._time_in_mode

    # Lifecycle methods
    def enter(self) -> None:
        """Called when mode becomes active."""
        self._active = True
        self._time_in_mode = 0.0

        logger.info(f"Entering mode: {self.name}")
        self.on_enter()

    def exit(self) -> None:
        """Called when mode is deactivated."""
        if not self._active:
            return
        logger.info(f"Exiting mode: {self.name}")
        self.on_exit()
        self._active = False

    def update(self, delta_ms: float) -> None:
        """Update mode state each frame.

        Args:
            delta_ms: Time since last update in milliseconds
        """
        if not self._active:
            return

        self._time_in_mode += delta_ms
        self.on_update(delta_ms)

    def handle_input(self, event: Event) -> bool:
        """Process input event.

        Returns:
            True if event was handled
        """
        if not self._active:
            return False

        return self.on_input(event)

    # Abstract methods (must be implemented by subclasses)
    @abstractmethod
    def on_enter(self) -> None:
        """Initialize mode state."""
        pass

    @abstractmethod
    def on_update(self, delta_ms: float) -> None:
        """Per-frame update logic."""
        pass

    @abstractmethod
    def on_input(self, event: Event) -> bool:
        """Handle user input. Return True if handled."""
        pass

    @abstractmethod
    def on_exit(self) -> None:
        """Cleanup mode state."""
        pass

    # Optional overrides
    def render_main(self, buffer) -> None:
        """Render to the playfield buffer. Override for custom rendering."""
        pass

    def get_hud_lines(self) -> List[str]:
        """Text lines shown in the corner of the window."""
        return [self.display_name]

    def get_overlay_lines(self) -> List[str]:
        """Centered message lines; empty when nothing should be shown."""
        return []

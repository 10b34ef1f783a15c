"""
Main entry point for the T-Rex runner.

Loads settings, configures logging and runs the pygame window.
"""

import asyncio
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from trex.config.settings import Settings, get_settings
from trex.core.events import Event, EventBus, EventType
from trex.game.random_source import RandomSource
from trex.modes.base import ModeContext
from trex.modes.runner import RunnerMode


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


logger = logging.getLogger(__name__)


class RunnerApp:
    """Wires the window, the event bus and the runner mode together."""

    def __init__(self, settings: Settings, rng: Optional[RandomSource] = None):
        from trex.simulator.window import SimulatorWindow, WindowConfig

        self.settings = settings
        self.event_bus = EventBus()

        self.mode = RunnerMode(
            ModeContext(settings=settings, event_bus=self.event_bus),
            rng=rng,
        )

        display = settings.display
        self.window = SimulatorWindow(
            config=WindowConfig(
                width=settings.world.width,
                height=settings.world.height,
                title=display.title,
                fullscreen=display.fullscreen,
                fps=display.fps,
                scale=display.scale,
            ),
            event_bus=self.event_bus,
        )
        self.window.mode = self.mode

        self._setup_event_handlers()
        logger.info("RunnerApp initialized")

    def _setup_event_handlers(self) -> None:
        """Route window events to the mode."""
        self.event_bus.subscribe(EventType.KEY_DOWN, self.mode.handle_input)
        self.event_bus.subscribe(EventType.KEY_UP, self.mode.handle_input)
        self.event_bus.subscribe(EventType.TICK, self._on_tick)
        self.event_bus.subscribe(EventType.SHUTDOWN, self._on_shutdown)

    def _on_tick(self, event: Event) -> None:
        """Handle frame tick - update and render."""
        delta = event.data.get("delta", 0.016)  # Default 60fps
        self.mode.update(delta * 1000)
        self.mode.render_main(self.window.buffer)

    def _on_shutdown(self, event: Event) -> None:
        self.mode.exit()

    async def run(self) -> None:
        self.mode.enter()
        await self.window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    try:
        settings = get_settings()
    except ValidationError:
        setup_logging()
        logger.exception("Invalid settings")
        sys.exit(1)

    setup_logging(settings.debug)
    logger.info("T-Rex runner starting...")

    try:
        asyncio.run(RunnerApp(settings).run())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("T-Rex runner stopped")


if __name__ == "__main__":
    main()

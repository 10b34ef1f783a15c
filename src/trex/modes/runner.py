"""T-Rex Runner - jump and duck past cacti while the world speeds up."""

import logging
from typing import List, Optional

import numpy as np
from numpy.typing import NDArray

from trex.core.events import Event, EventType
from trex.core.state import GamePhase
from trex.game.controller import GameController
from trex.game.random_source import RandomSource
from trex.graphics.renderer import SceneRenderer
from trex.modes.base import BaseMode, ModeContext

logger = logging.getLogger(__name__)


class RunnerMode(BaseMode):
    name = "runner"
    display_name = "No Internet Connection"

    def __init__(self, context: ModeContext, rng: Optional[RandomSource] = None):
        super().__init__(context)
        self._rng = rng
        self.controller: Optional[GameController] = None

        settings = context.settings
        self.renderer = SceneRenderer(
            ground_y=settings.player.y + settings.player.height,
        )

    def on_enter(self) -> None:
        self.controller = GameController(
            self.context.settings,
            rng=self._rng,
            event_bus=self.context.event_bus,
        )
        logger.debug(f"Runner controller ready (seed={self.context.settings.seed})")

    def on_exit(self) -> None:
        if self.controller is not None:
            self.controller.close()

    def on_input(self, event: Event) -> bool:
        if self.controller is None:
            return False

        key = event.data.get("key", "")
        if event.type == EventType.KEY_DOWN:
            return self.controller.key_down(key) is not None
        if event.type == EventType.KEY_UP:
            return self.controller.key_up(key) is not None
        return False

    def on_update(self, delta_ms: float) -> None:
        if self.controller is not None:
            self.controller.advance(delta_ms)

    def render_main(self, buffer: NDArray[np.uint8]) -> None:
        if self.controller is None:
            return
        self.renderer.render(buffer, self.controller.snapshot())

    def get_hud_lines(self) -> List[str]:
        if self.controller is None:
            return []
        state = self.controller.state
        return [f"Score: {state.score}", f"High Score: {state.high_score}"]

    def get_overlay_lines(self) -> List[str]:
        if self.controller is None:
            return []
        phase = self.controller.phase
        if phase == GamePhase.NOT_STARTED:
            return [
                self.display_name,
                "Press SPACE or UP to start",
                "Use UP to jump, DOWN to duck",
            ]
        if phase == GamePhase.OVER:
            return [
                "Game Over!",
                f"Score: {self.controller.state.score}",
                "Press SPACE or UP to restart",
            ]
        return []

    @property
    def offline(self) -> bool:
        """Connection indicator: shown as offline once a round has begun."""
        return self.controller is not None and self.controller.phase != GamePhase.NOT_STARTED

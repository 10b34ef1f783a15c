"""Fixed-timestep simulation clock."""

import logging

logger = logging.getLogger(__name__)


class SimulationClock:
    """Turns variable frame time into whole fixed-length ticks.

    Leftover time carries over to the next frame. After a long stall at most
    ``max_ticks_per_frame`` ticks are produced and the rest is dropped, so
    the game slows down instead of trying to catch up forever.
    """

    def __init__(self, tick_ms: float, max_ticks_per_frame: int = 5):
        if tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        self.tick_ms = tick_ms
        self.max_ticks_per_frame = max_ticks_per_frame
        self._accumulator = 0.0
        self.total_ticks = 0

    @property
    def pending_ms(self) -> float:
        return self._accumulator

    def advance(self, delta_ms: float) -> int:
        """Add ``delta_ms`` of real time and return how many ticks are due."""
        if delta_ms <= 0:
            return 0

        self._accumulator += delta_ms
        ticks = int(self._accumulator // self.tick_ms)
        if ticks > self.max_ticks_per_frame:
            logger.debug(f"Clock behind by {ticks} ticks, dropping {ticks - self.max_ticks_per_frame}")
            ticks = self.max_ticks_per_frame
            self._accumulator = 0.0
        else:
            self._accumulator -= ticks * self.tick_ms

        self.total_ticks += ticks
        return ticks

    def reset(self) -> None:
        self._accumulator = 0.0

"""Random number sources for spawning.

The spawner only ever asks for one float in [0, 1) at a time, so tests can
hand it a fixed script instead of a real generator.
"""

from typing import Iterable, Optional, Protocol

import numpy as np


class RandomSource(Protocol):
    def next_float(self) -> float:
        """Return a float in [0, 1)."""
        ...


class NumpyRandom:
    """RandomSource backed by a numpy Generator."""

    def __init__(
            self,
            seed: Optional[int] = None,
            rng: Optional[np.random.Generator] = None,
        ):
        if rng is None:
            rng = np.random.default_rng(seed)
        self.rng = rng

    def next_float(self) -> float:
        return float(self.rng.random())


class ScriptedRandom:
    """RandomSource that replays a fixed sequence, cycling when exhausted."""

    def __init__(self, values: Iterable[float]):
        self._values = list(values)
        if not self._values:
            raise ValueError("ScriptedRandom needs at least one value")
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"value out of range [0, 1): {value}")
        self._index = 0

    def next_float(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value

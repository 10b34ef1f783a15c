"""Keyboard to game command mapping.

Keys are identified by their pygame key names ("space", "up", "down") so
the simulation never has to import pygame.
"""

from enum import Enum, auto
from typing import Iterable, Optional

from trex.core.state import GamePhase


class Command(Enum):
    """Commands consumed by the game controller."""
    START = auto()
    JUMP = auto()
    DUCK = auto()
    STOP_DUCK = auto()
    TICK = auto()  # One simulation step, produced by the clock


class InputMapper:
    """Translates key presses and releases into commands.

    The jump key doubles as the start/restart key outside a running round.
    """

    def __init__(
        self,
        jump_keys: Iterable[str] = ("space", "up"),
        duck_keys: Iterable[str] = ("down",),
    ):
        self.jump_keys = frozenset(jump_keys)
        self.duck_keys = frozenset(duck_keys)

    def key_down(self, key: str, phase: GamePhase) -> Optional[Command]:
        if key in self.jump_keys:
            if phase != GamePhase.RUNNING:
                return Command.START
            return Command.JUMP
        if key in self.duck_keys:
            return Command.DUCK
        return None

    def key_up(self, key: str) -> Optional[Command]:
        if key in self.duck_keys:
            return Command.STOP_DUCK
        return None

"""Game modes."""

from trex.modes.base import BaseMode, ModeContext
from trex.modes.runner import RunnerMode

__all__ = ["BaseMode", "ModeContext", "RunnerMode"]

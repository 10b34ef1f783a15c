import pytest

from trex.config.settings import Settings
from trex.core.events import EventBus
from trex.game.controller import GameController
from trex.game.input import Command
from trex.game.random_source import ScriptedRandom
from trex.game.state import GameState


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def rng() -> ScriptedRandom:
    return ScriptedRandom([0.25, 0.5, 0.75])


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def controller(settings, rng, event_bus) -> GameController:
    return GameController(settings, rng=rng, event_bus=event_bus)


@pytest.fixture
def running(controller) -> GameController:
    """Controller with a round already started."""
    controller.submit(Command.START)
    controller.process()
    return controller


@pytest.fixture
def state(settings) -> GameState:
    return GameState.initial(settings)


def run_frames(controller: GameController, frames: int) -> int:
    """Advance one tick-length frame at a time. Returns ticks applied."""
    ticks = 0
    for _ in range(frames):
        ticks += controller.advance(controller.settings.tick_ms)
    return ticks

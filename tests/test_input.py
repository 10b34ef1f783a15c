import pytest

from trex.core.state import GamePhase
from trex.game.input import Command, InputMapper


@pytest.fixture
def mapper() -> InputMapper:
    return InputMapper()


@pytest.mark.parametrize("key", ["space", "up"])
@pytest.mark.parametrize("phase,expected", [
    (GamePhase.NOT_STARTED, Command.START),
    (GamePhase.OVER, Command.START),
    (GamePhase.RUNNING, Command.JUMP),
])
def test_jump_keys_depend_on_phase(mapper, key, phase, expected):
    assert mapper.key_down(key, phase) == expected


@pytest.mark.parametrize("phase", list(GamePhase))
def test_down_ducks_in_any_phase(mapper, phase):
    assert mapper.key_down("down", phase) == Command.DUCK


def test_down_release_stops_duck(mapper):
    assert mapper.key_up("down") == Command.STOP_DUCK


@pytest.mark.parametrize("key", ["space", "up", "left", "a"])
def test_other_releases_are_ignored(mapper, key):
    assert mapper.key_up(key) is None


def test_unmapped_keys_are_ignored(mapper):
    assert mapper.key_down("left", GamePhase.RUNNING) is None
    assert mapper.key_down("return", GamePhase.NOT_STARTED) is None


def test_custom_bindings():
    mapper = InputMapper(jump_keys=["w"], duck_keys=["s"])
    assert mapper.key_down("w", GamePhase.RUNNING) == Command.JUMP
    assert mapper.key_down("s", GamePhase.RUNNING) == Command.DUCK
    assert mapper.key_down("space", GamePhase.RUNNING) is None

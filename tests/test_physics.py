import pytest

from trex.config.settings import PlayerSettings
from trex.game.entities import Cloud, Obstacle, Player
from trex.game.physics import (
    JumpState,
    apply_impulse,
    scroll_clouds,
    scroll_obstacles,
    start_duck,
    start_jump,
    step_jump,
    stop_duck,
)


@pytest.fixture
def cfg() -> PlayerSettings:
    return PlayerSettings()


@pytest.fixture
def player(cfg) -> Player:
    return Player(x=cfg.x, y=cfg.y, width=cfg.width, height=cfg.height)


@pytest.mark.parametrize("velocity,gravity", [
    (20.0, 0.6),
    (15.0, 0.8),
    (1.0, 0.999),
    (7.3, 0.05),
    (30.0, 29.0),
])
def test_jump_always_lands_exactly_on_ground(velocity, gravity):
    cfg = PlayerSettings(jump_velocity=velocity, gravity=gravity)
    player = Player(x=cfg.x, y=cfg.y, width=cfg.width, height=cfg.height)
    jump = JumpState()

    assert start_jump(player, jump, cfg)
    landed = False
    for _ in range(100_000):
        if apply_impulse(player, jump, cfg):
            landed = True
            break
        assert player.y < cfg.y

    assert landed
    assert player.y == cfg.y
    assert not player.airborne


def test_jump_rises_first(player, cfg):
    jump = JumpState()
    start_jump(player, jump, cfg)
    apply_impulse(player, jump, cfg)
    assert player.y == pytest.approx(cfg.y - cfg.jump_velocity)
    assert jump.velocity == pytest.approx(cfg.jump_velocity - cfg.gravity)


def test_jump_refused_while_airborne(player, cfg):
    jump = JumpState()
    assert start_jump(player, jump, cfg)
    apply_impulse(player, jump, cfg)
    velocity = jump.velocity

    assert not start_jump(player, jump, cfg)
    assert jump.velocity == velocity


def test_jump_refused_while_ducking(player, cfg):
    jump = JumpState()
    start_duck(player, cfg)
    assert not start_jump(player, jump, cfg)
    assert not player.airborne


def test_impulses_follow_their_own_schedule(player, cfg):
    jump = JumpState()
    start_jump(player, jump, cfg)

    # 16.67 ms frames, 20 ms impulses
    step_jump(player, jump, 1000 / 60, cfg)
    assert player.y == cfg.y

    step_jump(player, jump, 1000 / 60, cfg)
    assert player.y == pytest.approx(cfg.y - cfg.jump_velocity)

    # A long step runs several impulses
    y_before = player.y
    step_jump(player, jump, 60, cfg)
    assert player.y < y_before


def test_step_jump_is_noop_on_ground(player, cfg):
    jump = JumpState()
    assert not step_jump(player, jump, 100, cfg)
    assert player.y == cfg.y


def test_step_jump_reports_landing(player, cfg):
    jump = JumpState()
    start_jump(player, jump, cfg)
    landed = False
    for _ in range(1000):
        if step_jump(player, jump, 1000 / 60, cfg):
            landed = True
            break
    assert landed
    assert player.y == cfg.y
    assert jump.elapsed_ms == 0.0


def test_duck_shrinks_and_restores(player, cfg):
    assert start_duck(player, cfg)
    assert player.ducking
    assert player.height == cfg.duck_height
    assert player.y == cfg.y

    assert stop_duck(player, cfg)
    assert not player.ducking
    assert player.height == cfg.height


def test_duck_ignored_while_airborne(player, cfg):
    jump = JumpState()
    start_jump(player, jump, cfg)
    apply_impulse(player, jump, cfg)

    assert not start_duck(player, cfg)
    assert not player.ducking
    assert player.height == cfg.height


def test_stop_duck_without_duck_changes_nothing(player, cfg):
    assert not stop_duck(player, cfg)
    assert player.height == cfg.height


def test_scroll_moves_left():
    obstacles = [Obstacle(800, 200, 20, 40), Obstacle(300, 180, 30, 60)]
    scroll_obstacles(obstacles, 5.5)
    assert [o.x for o in obstacles] == [794.5, 294.5]

    clouds = [Cloud(800, 60, 60, 30, speed=1.5), Cloud(100, 80, 60, 30, speed=2.0)]
    scroll_clouds(clouds)
    assert [c.x for c in clouds] == [798.5, 98.0]

import numpy as np

from trex.core.state import GamePhase
from trex.game.entities import Obstacle, ObstacleKind
from trex.game.state import GameSnapshot
from trex.graphics.primitives import blend_rect, draw_rect, new_buffer
from trex.graphics.renderer import Palette, SceneRenderer


def make_buffer(settings):
    return new_buffer(settings.world.width, settings.world.height)


def renderer_for(settings):
    return SceneRenderer(ground_y=settings.player.y + settings.player.height)


def test_draw_rect_clips_to_buffer():
    buffer = new_buffer(10, 10)
    draw_rect(buffer, -5, -5, 8, 8, (255, 0, 0))
    assert tuple(buffer[0, 0]) == (255, 0, 0)
    assert tuple(buffer[2, 2]) == (255, 0, 0)
    assert tuple(buffer[3, 3]) == (0, 0, 0)

    # Entirely outside: nothing happens
    draw_rect(buffer, 20, 20, 5, 5, (0, 255, 0))
    assert not (buffer[:, :, 1] > 0).any()


def test_outline_leaves_center_empty():
    buffer = new_buffer(10, 10)
    draw_rect(buffer, 0, 0, 10, 10, (255, 255, 255), filled=False)
    assert tuple(buffer[0, 5]) == (255, 255, 255)
    assert tuple(buffer[5, 5]) == (0, 0, 0)


def test_blend_rect_mixes_colors():
    buffer = new_buffer(4, 4)
    buffer[:, :] = (200, 200, 200)
    blend_rect(buffer, 0, 0, 4, 4, (0, 0, 0), 0.5)
    assert tuple(buffer[1, 1]) == (100, 100, 100)


def test_title_screen(settings, controller):
    buffer = make_buffer(settings)
    renderer_for(settings).render(buffer, controller.snapshot())

    palette = Palette()
    assert tuple(buffer[10, 10]) == palette.background
    # Ground line right under the player
    assert tuple(buffer[240, 400]) == palette.ground
    # Dino body
    assert tuple(buffer[230, 60]) == palette.dino


def test_ducking_dino_is_lower(settings, running):
    running.key_down("down")
    running.process()

    buffer = make_buffer(settings)
    renderer_for(settings).render(buffer, running.snapshot())

    palette = Palette()
    assert tuple(buffer[215, 60]) == palette.dino
    assert tuple(buffer[205, 60]) == palette.background


def test_cacti_are_drawn(settings, state):
    state.obstacles = [
        Obstacle(300, 200, 20, 40, kind=ObstacleKind.SMALL),
        Obstacle(500, 180, 30, 60, kind=ObstacleKind.LARGE),
    ]

    buffer = make_buffer(settings)
    renderer_for(settings).render(buffer, GameSnapshot.capture(state, GamePhase.RUNNING))

    palette = Palette()
    assert tuple(buffer[220, 310]) == palette.cactus
    assert tuple(buffer[230, 515]) == palette.cactus
    assert tuple(buffer[230, 301]) == palette.background


def test_game_over_darkens_scene(settings, running):
    running.state.obstacles.append(Obstacle(60, 200, 20, 40))
    running.advance(settings.tick_ms)
    assert running.phase == GamePhase.OVER

    buffer = make_buffer(settings)
    renderer_for(settings).render(buffer, running.snapshot())

    assert np.all(buffer[10, 10] < 255)
    assert tuple(buffer[10, 10]) == (127, 127, 127)

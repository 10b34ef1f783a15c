from trex.game.collision import update_clouds, update_obstacles
from trex.game.entities import Cloud, Obstacle, ObstacleKind


def far_above(x: float) -> Obstacle:
    """A cactus that can never touch the player."""
    return Obstacle(x, -1000, 20, 40, kind=ObstacleKind.SMALL)


def test_obstacle_scores_once_when_passing_player(settings, state):
    state.obstacles = [far_above(54)]

    outcome = update_obstacles(state, settings)
    assert outcome.scored == 1
    assert state.score == 1
    assert state.obstacles[0].passed
    assert state.obstacles[0].x == 49

    for _ in range(5):
        outcome = update_obstacles(state, settings)
        assert outcome.scored == 0
    assert state.score == 1


def test_no_score_before_crossing(settings, state):
    state.obstacles = [far_above(55)]
    outcome = update_obstacles(state, settings)
    # 55 - 5 = 50 is not left of x=50 yet
    assert outcome.scored == 0
    assert not state.obstacles[0].passed


def test_each_obstacle_scores_separately(settings, state):
    state.obstacles = [far_above(52), far_above(53), far_above(400)]
    outcome = update_obstacles(state, settings)
    assert outcome.scored == 2
    assert state.score == 2


def test_hit_detected_with_full_obstacle_rect(settings, state):
    # Player hitbox spans x 55..85, y 205..235
    state.obstacles = [Obstacle(90, 200, 20, 40, kind=ObstacleKind.SMALL)]
    outcome = update_obstacles(state, settings)
    assert state.obstacles[0].x == 85
    assert outcome.collided


def test_margin_overlap_is_not_a_hit(settings, state):
    state.obstacles = [Obstacle(91, 200, 20, 40, kind=ObstacleKind.SMALL)]
    outcome = update_obstacles(state, settings)
    assert state.obstacles[0].x == 86
    assert not outcome.collided


def test_jumping_player_clears_cactus(settings, state):
    state.player.y = 120
    state.player.airborne = True
    state.obstacles = [Obstacle(70, 180, 30, 60, kind=ObstacleKind.LARGE)]
    outcome = update_obstacles(state, settings)
    assert not outcome.collided


def test_offscreen_obstacles_are_dropped(settings, state):
    state.obstacles = [far_above(-44), far_above(-46), far_above(300)]
    update_obstacles(state, settings)

    # -49 stays, -51 goes
    assert [o.x for o in state.obstacles] == [-49, 295]
    assert all(o.x > settings.world.obstacle_cleanup_x for o in state.obstacles)


def test_obstacle_exactly_on_threshold_is_dropped(settings, state):
    state.obstacles = [far_above(-45)]
    update_obstacles(state, settings)
    assert state.obstacles == []


def test_clouds_move_at_own_speed_and_are_dropped(settings, state):
    state.clouds = [
        Cloud(-99, 60, 60, 30, speed=1.0),
        Cloud(-98, 60, 60, 30, speed=1.0),
        Cloud(500, 60, 60, 30, speed=2.5),
    ]
    update_clouds(state, settings)
    assert [c.x for c in state.clouds] == [-99, 497.5]

"""Time-gated spawning of cacti and clouds, plus the difficulty ramp."""

import logging

from trex.config.settings import Settings
from trex.game.entities import Cloud, Obstacle, ObstacleKind
from trex.game.random_source import RandomSource
from trex.game.state import GameState

logger = logging.getLogger(__name__)


class Spawner:
    """Creates entities when their spawn gate opens.

    Obstacles come faster as the game speeds up: the gate is
    ``obstacle_interval_ms / (speed / base_speed)``. Clouds use a fixed gate.
    """

    def __init__(self, settings: Settings, rng: RandomSource):
        self.settings = settings
        self.rng = rng

    def obstacle_interval(self, speed: float) -> float:
        return self.settings.spawn.obstacle_interval_ms / (speed / self.settings.speed.base)

    def ramp_speed(self, state: GameState) -> None:
        """Bump the speed every ``ramp_every_ticks`` ticks, up to the cap."""
        cfg = self.settings.speed
        if state.elapsed_ticks > 0 and state.elapsed_ticks % cfg.ramp_every_ticks == 0:
            new_speed = min(state.speed + cfg.increment, cfg.maximum)
            if new_speed > state.speed:
                logger.info(f"Speed up: {state.speed:.1f} -> {new_speed:.1f}")
            state.speed = max(state.speed, new_speed)

    def update(self, state: GameState) -> None:
        """Run the ramp and both spawn gates for the current tick."""
        self.ramp_speed(state)

        now = state.time_ms
        if (state.last_obstacle_ms is None
                or now - state.last_obstacle_ms > self.obstacle_interval(state.speed)):
            state.obstacles.append(self.create_obstacle())
            state.last_obstacle_ms = now
            state.obstacles_spawned += 1

        if (state.last_cloud_ms is None
                or now - state.last_cloud_ms > self.settings.spawn.cloud_interval_ms):
            state.clouds.append(self.create_cloud())
            state.last_cloud_ms = now
            state.clouds_spawned += 1

    def create_obstacle(self) -> Obstacle:
        cfg = self.settings.spawn
        kind = ObstacleKind.SMALL if self.rng.next_float() < 0.5 else ObstacleKind.LARGE
        if kind == ObstacleKind.SMALL:
            obstacle = Obstacle(cfg.spawn_x, cfg.small_y, cfg.small_width, cfg.small_height, kind=kind)
        else:
            obstacle = Obstacle(cfg.spawn_x, cfg.large_y, cfg.large_width, cfg.large_height, kind=kind)
        logger.debug(f"Spawned {kind.value} cactus")
        return obstacle

    def create_cloud(self) -> Cloud:
        cfg = self.settings.spawn
        y = cfg.cloud_y_min + self.rng.next_float() * cfg.cloud_y_range
        speed = cfg.cloud_speed_min + self.rng.next_float() * cfg.cloud_speed_range
        return Cloud(cfg.spawn_x, y, cfg.cloud_width, cfg.cloud_height, speed=speed)

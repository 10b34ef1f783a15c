"""Scoring, hit detection and off-screen cleanup."""

from dataclasses import dataclass
import logging

from trex.config.settings import Settings
from trex.game.entities import overlaps
from trex.game.physics import scroll_clouds, scroll_obstacles
from trex.game.state import GameState

logger = logging.getLogger(__name__)


@dataclass
class TickOutcome:
    scored: int = 0
    collided: bool = False


def update_clouds(state: GameState, settings: Settings) -> None:
    scroll_clouds(state.clouds)
    limit = settings.world.cloud_cleanup_x
    state.clouds = [c for c in state.clouds if c.x > limit]


def update_obstacles(state: GameState, settings: Settings) -> TickOutcome:
    """Move every cactus, score the ones the player has cleared, test hits.

    An obstacle scores once, on the tick its left edge first moves past the
    player's x. Hits use the player's inset hitbox against the cactus's full
    rectangle.
    """
    outcome = TickOutcome()
    player = state.player
    hitbox = player.hitbox(settings.player.hitbox_margin)

    scroll_obstacles(state.obstacles, state.speed)

    for obstacle in state.obstacles:
        if not obstacle.passed and obstacle.x < player.x:
            obstacle.passed = True
            state.score += 1
            outcome.scored += 1

        if overlaps(hitbox, obstacle):
            outcome.collided = True

    limit = settings.world.obstacle_cleanup_x
    state.obstacles = [o for o in state.obstacles if o.x > limit]

    if outcome.collided:
        logger.debug(f"Hit at score {state.score}")
    return outcome

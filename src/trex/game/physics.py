"""Player jump physics and horizontal scrolling.

The jump runs on its own fixed impulse schedule (one impulse every
``jump_interval_ms`` of simulated time) but is driven from the simulation
tick, so no second timer exists.
"""

from dataclasses import dataclass
import logging
from typing import Iterable

from trex.config.settings import PlayerSettings
from trex.game.entities import Cloud, Obstacle, Player

logger = logging.getLogger(__name__)


@dataclass
class JumpState:
    velocity: float = 0.0
    elapsed_ms: float = 0.0  # Simulated time not yet spent on impulses


def start_jump(player: Player, jump: JumpState, cfg: PlayerSettings) -> bool:
    """Launch a jump. Refused while airborne or ducking."""
    if player.airborne or player.ducking:
        return False
    player.airborne = True
    jump.velocity = cfg.jump_velocity
    jump.elapsed_ms = 0.0
    logger.debug("Jump started")
    return True


def apply_impulse(player: Player, jump: JumpState, cfg: PlayerSettings) -> bool:
    """Run one jump impulse. Returns True when the player has landed."""
    new_y = player.y - jump.velocity
    jump.velocity -= cfg.gravity

    if new_y >= cfg.y:
        player.y = cfg.y
        player.airborne = False
        jump.velocity = 0.0
        jump.elapsed_ms = 0.0
        return True

    player.y = new_y
    return False


def step_jump(
    player: Player,
    jump: JumpState,
    delta_ms: float,
    cfg: PlayerSettings,
) -> bool:
    """Advance the jump by ``delta_ms`` of simulated time.

    Returns True if the player landed during this step.
    """
    if not player.airborne:
        return False

    jump.elapsed_ms += delta_ms
    while jump.elapsed_ms >= cfg.jump_interval_ms:
        jump.elapsed_ms -= cfg.jump_interval_ms
        if apply_impulse(player, jump, cfg):
            logger.debug("Player landed")
            return True
    return False


def start_duck(player: Player, cfg: PlayerSettings) -> bool:
    """Shrink the player. Ignored while airborne."""
    if player.airborne:
        return False
    player.ducking = True
    player.height = cfg.duck_height
    return True


def stop_duck(player: Player, cfg: PlayerSettings) -> bool:
    if not player.ducking:
        return False
    player.ducking = False
    player.height = cfg.height
    return True


def scroll_obstacles(obstacles: Iterable[Obstacle], speed: float) -> None:
    for obstacle in obstacles:
        obstacle.x -= speed


def scroll_clouds(clouds: Iterable[Cloud]) -> None:
    for cloud in clouds:
        cloud.x -= cloud.speed

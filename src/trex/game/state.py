"""Mutable game state and the read-only snapshot handed to renderers."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from trex.config.settings import Settings
from trex.core.state import GamePhase
from trex.game.entities import Cloud, Obstacle, Player, Rect
from trex.game.physics import JumpState


@dataclass
class GameState:
    """Everything one round of the game mutates.

    Owned by a single GameController; the update functions receive it by
    reference and nothing else holds on to it.
    """

    player: Player
    jump: JumpState = field(default_factory=JumpState)
    obstacles: List[Obstacle] = field(default_factory=list)
    clouds: List[Cloud] = field(default_factory=list)

    # Down key still held; applied as a duck on landing
    duck_held: bool = False

    speed: float = 5.0
    score: int = 0
    high_score: int = 0

    elapsed_ticks: int = 0
    time_ms: float = 0.0  # Simulated time since the round started

    # None until the first spawn of the round
    last_obstacle_ms: Optional[float] = None
    last_cloud_ms: Optional[float] = None

    # Lifetime counters, handy for the debug panel and tests
    obstacles_spawned: int = 0
    clouds_spawned: int = 0

    @classmethod
    def initial(cls, settings: Settings) -> "GameState":
        return cls(player=rest_player(settings), speed=settings.speed.base)


def rest_player(settings: Settings) -> Player:
    cfg = settings.player
    return Player(x=cfg.x, y=cfg.y, width=cfg.width, height=cfg.height)


def reset_round(state: GameState, settings: Settings) -> None:
    """Prepare ``state`` for a fresh round. The high score survives."""
    state.player = rest_player(settings)
    state.jump = JumpState()
    state.obstacles = []
    state.clouds = []
    state.duck_held = False
    state.speed = settings.speed.base
    state.score = 0
    state.elapsed_ticks = 0
    state.time_ms = 0.0
    state.last_obstacle_ms = None
    state.last_cloud_ms = None


@dataclass(frozen=True)
class GameSnapshot:
    phase: GamePhase
    score: int
    high_score: int
    player: Rect
    ducking: bool
    airborne: bool
    obstacles: Tuple[Obstacle, ...]
    clouds: Tuple[Cloud, ...]
    speed: float

    @classmethod
    def capture(cls, state: GameState, phase: GamePhase) -> "GameSnapshot":
        """Copy the renderable parts of ``state``."""
        player = state.player
        return cls(
            phase=phase,
            score=state.score,
            high_score=state.high_score,
            player=Rect(player.x, player.y, player.width, player.height),
            ducking=player.ducking,
            airborne=player.airborne,
            obstacles=tuple(
                Obstacle(o.x, o.y, o.width, o.height, kind=o.kind, passed=o.passed)
                for o in state.obstacles
            ),
            clouds=tuple(
                Cloud(c.x, c.y, c.width, c.height, speed=c.speed)
                for c in state.clouds
            ),
            speed=state.speed,
        )

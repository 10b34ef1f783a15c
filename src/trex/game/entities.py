"""Game objects: the player, cacti and clouds."""

from dataclasses import dataclass
from enum import Enum


@dataclass
class Rect:
    """Axis-aligned rectangle with its origin at the top-left corner."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def inset(self, margin: float) -> "Rect":
        """Return a copy shrunk by ``margin`` on every side."""
        return Rect(
            x=self.x + margin,
            y=self.y + margin,
            width=self.width - 2 * margin,
            height=self.height - 2 * margin,
        )


def overlaps(a: Rect, b: Rect) -> bool:
    """Rectangle overlap test. Touching edges count as overlapping."""
    return not (
        a.right < b.x
        or a.x > b.right
        or a.bottom < b.y
        or a.y > b.bottom
    )


@dataclass
class Player(Rect):
    ducking: bool = False
    airborne: bool = False

    def hitbox(self, margin: float) -> Rect:
        """Collision box, smaller than the sprite so near misses survive."""
        return self.inset(margin)


class ObstacleKind(Enum):
    SMALL = "small"
    LARGE = "large"


@dataclass
class Obstacle(Rect):
    kind: ObstacleKind = ObstacleKind.SMALL
    passed: bool = False


@dataclass
class Cloud(Rect):
    speed: float = 1.0

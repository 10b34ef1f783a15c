"""Draws game snapshots into an RGB buffer."""

from dataclasses import dataclass

from trex.core.state import GamePhase
from trex.game.entities import Obstacle, ObstacleKind, Rect
from trex.game.state import GameSnapshot
from trex.graphics.primitives import Buffer, Color, blend_rect, draw_rect, fill


@dataclass
class Palette:
    background: Color = (255, 255, 255)
    ground: Color = (209, 213, 219)
    dino: Color = (31, 41, 55)
    cactus: Color = (31, 41, 55)
    cloud: Color = (229, 231, 235)
    cloud_alpha: float = 0.8
    overlay: Color = (0, 0, 0)
    overlay_alpha: float = 0.5


class SceneRenderer:
    """Flat-shaded renderer for the playfield.

    Text (score, prompts) is drawn by the window on top of the buffer.
    """

    def __init__(self, ground_y: float, palette: Palette | None = None):
        self.ground_y = ground_y
        self.palette = palette or Palette()

    def render(self, buffer: Buffer, snapshot: GameSnapshot) -> None:
        p = self.palette
        fill(buffer, p.background)

        for cloud in snapshot.clouds:
            blend_rect(buffer, cloud.x, cloud.y, cloud.width, cloud.height, p.cloud, p.cloud_alpha)

        draw_rect(buffer, 0, self.ground_y, buffer.shape[1], 2, p.ground)

        self._draw_dino(buffer, snapshot.player, snapshot.ducking)
        for obstacle in snapshot.obstacles:
            self._draw_cactus(buffer, obstacle)

        if snapshot.phase == GamePhase.OVER:
            h, w = buffer.shape[:2]
            blend_rect(buffer, 0, 0, w, h, p.overlay, p.overlay_alpha)

    def _draw_dino(self, buffer: Buffer, player: Rect, ducking: bool) -> None:
        color = self.palette.dino
        x, y, w, h = player.x, player.y, player.width, player.height
        if ducking:
            # Flat crouch: lower half only
            draw_rect(buffer, x, y + h * 0.5, w, h * 0.5, color)
            return
        # Body plus a raised head towards the front
        draw_rect(buffer, x, y + h * 0.3, w, h * 0.7, color)
        draw_rect(buffer, x + w * 0.4, y, w * 0.4, h * 0.3, color)

    def _draw_cactus(self, buffer: Buffer, obstacle: Obstacle) -> None:
        color = self.palette.cactus
        x, y, w, h = obstacle.x, obstacle.y, obstacle.width, obstacle.height
        if obstacle.kind == ObstacleKind.SMALL:
            draw_rect(buffer, x + w * 0.2, y, w * 0.6, h, color)
            draw_rect(buffer, x + w * 0.5, y + h * 0.2, w * 0.4, h * 0.2, color)
        else:
            draw_rect(buffer, x + w * 0.3, y, w * 0.4, h, color)
            draw_rect(buffer, x + w * 0.1, y + h * 0.2, w * 0.8, h * 0.2, color)

"""
Simulator window using pygame.

Hosts the playfield buffer, captures the keyboard and draws the HUD.
"""

import pygame
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from ..core.events import EventBus, EventType, Event, key_down_event, key_up_event, tick_event
from ..core.state import GamePhase
from ..graphics.primitives import Buffer, new_buffer
from ..modes.base import BaseMode

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    width: int = 800
    height: int = 400
    title: str = "No Internet Connection"
    fullscreen: bool = False
    fps: int = 60
    scale: int = 1

    # Colors
    text_color: tuple[int, int, int] = (17, 24, 39)
    muted_color: tuple[int, int, int] = (75, 85, 99)
    overlay_text_color: tuple[int, int, int] = (255, 255, 255)
    online_color: tuple[int, int, int] = (34, 197, 94)
    offline_color: tuple[int, int, int] = (239, 68, 68)
    panel_color: tuple[int, int, int] = (40, 40, 50)


class SimulatorWindow:
    """
    Desktop window for the runner.

    Keyboard Mapping:
        SPACE / UP: Start, restart, jump
        DOWN: Duck (hold)
        D: Toggle debug overlay
        S: Capture screenshot
        ESC / Q: Exit
    """

    SYSTEM_KEYS = ("escape", "q", "d", "s")

    def __init__(
        self,
        config: WindowConfig | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config or WindowConfig()
        self.event_bus = event_bus or EventBus()

        # Mode whose text is drawn over the playfield
        self.mode: Optional[BaseMode] = None

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0
        self._show_debug = False

        self.buffer: Buffer = new_buffer(self.config.width, self.config.height)

        # Fonts
        self._font: pygame.font.Font | None = None
        self._small_font: pygame.font.Font | None = None
        self._title_font: pygame.font.Font | None = None

        logger.info("SimulatorWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN

        self._screen = pygame.display.set_mode(
            (self.config.width * self.config.scale, self.config.height * self.config.scale),
            flags
        )
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont("monospace", 18 * self.config.scale)
        self._small_font = pygame.font.SysFont("monospace", 14 * self.config.scale)
        self._title_font = pygame.font.SysFont("monospace", 28 * self.config.scale, bold=True)

        logger.info(f"Pygame initialized: {self.config.width}x{self.config.height}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.KEYUP:
                self._handle_keyup(event)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key == pygame.K_ESCAPE or key == pygame.K_q:
            self._running = False
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug
        elif key == pygame.K_s:
            self._capture_screenshot()
        else:
            self.event_bus.emit(key_down_event(pygame.key.name(key)))

    def _handle_keyup(self, event: pygame.event.Event) -> None:
        """Handle key release."""
        name = pygame.key.name(event.key)
        if name not in self.SYSTEM_KEYS:
            self.event_bus.emit(key_up_event(name))

    def _render(self) -> None:
        """Blit the playfield and draw text on top."""
        if not self._screen:
            return

        surface = pygame.surfarray.make_surface(self.buffer.swapaxes(0, 1))
        if self.config.scale != 1:
            surface = pygame.transform.scale(surface, self._screen.get_size())
        self._screen.blit(surface, (0, 0))

        self._render_hud()
        self._render_overlay()
        self._render_connection_indicator()
        if self._show_debug:
            self._render_debug_panel()

        pygame.display.flip()

    def _render_hud(self) -> None:
        if not self.mode or not self._font:
            return
        s = self.config.scale
        y = 16 * s
        for i, line in enumerate(self.mode.get_hud_lines()):
            font = self._font if i == 0 else self._small_font
            color = self.config.text_color if i == 0 else self.config.muted_color
            text_surface = font.render(line, True, color)
            self._screen.blit(text_surface, (16 * s, y))
            y += text_surface.get_height() + 2 * s

    def _render_overlay(self) -> None:
        """Centered title / game-over message."""
        if not self.mode or not self._title_font:
            return
        lines = self.mode.get_overlay_lines()
        if not lines:
            return

        # White on the darkened game-over screen, dark on the title screen
        controller = getattr(self.mode, "controller", None)
        game_over = controller is not None and controller.phase == GamePhase.OVER
        color = self.config.overlay_text_color if game_over else self.config.text_color

        surfaces = [self._title_font.render(lines[0], True, color)]
        surfaces += [self._font.render(line, True, color) for line in lines[1:]]

        total_h = sum(surf.get_height() for surf in surfaces) + 12 * (len(surfaces) - 1)
        y = (self._screen.get_height() - total_h) // 2
        for surf in surfaces:
            rect = surf.get_rect(centerx=self._screen.get_width() // 2, top=y)
            self._screen.blit(surf, rect)
            y += surf.get_height() + 12

    def _render_connection_indicator(self) -> None:
        if not self.mode:
            return
        s = self.config.scale
        offline = getattr(self.mode, "offline", False)
        color = self.config.offline_color if offline else self.config.online_color
        center = (self._screen.get_width() - 24 * s, 24 * s)
        pygame.draw.circle(self._screen, color, center, 8 * s)

    def _render_debug_panel(self) -> None:
        """Render the debug information panel."""
        if not self._small_font:
            return

        lines = [
            f"FPS: {self._clock.get_fps():.1f}" if self._clock else "FPS: --",
            f"Frame: {self._frame_count}",
        ]
        controller = getattr(self.mode, "controller", None)
        if controller is not None:
            state = controller.state
            lines += [
                f"Phase: {controller.phase.name}",
                f"Speed: {state.speed:.1f}",
                f"Ticks: {state.elapsed_ticks}",
                f"Obstacles: {len(state.obstacles)} ({state.obstacles_spawned})",
                f"Clouds: {len(state.clouds)}",
            ]

        s = self.config.scale
        width = 220 * s
        height = (len(lines) * 18 + 16) * s
        rect = pygame.Rect(self._screen.get_width() - width - 48 * s, 8 * s, width, height)
        pygame.draw.rect(self._screen, self.config.panel_color, rect, border_radius=5)

        y = rect.y + 8 * s
        for line in lines:
            text_surface = self._small_font.render(line, True, (200, 200, 220))
            self._screen.blit(text_surface, (rect.x + 10 * s, y))
            y += 18 * s

    def _capture_screenshot(self) -> None:
        """Capture and save a screenshot."""
        if self._screen:
            filename = f"screenshot_{self._frame_count}.png"
            pygame.image.save(self._screen, filename)
            logger.info(f"Screenshot saved: {filename}")

    async def run(self) -> None:
        """Main window loop."""
        self._init_pygame()
        self._running = True

        logger.info("Window loop started")

        while self._running:
            # Input first so this frame's tick sees it
            self._handle_events()

            if self._clock:
                delta = self._clock.get_time() / 1000.0
                self.event_bus.emit(tick_event(delta, self._frame_count))

            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            # Yield to other tasks
            await asyncio.sleep(0)

        self.event_bus.emit(Event(EventType.SHUTDOWN, source="window"))
        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Window closed")

"""
Main game window using pygame.

Drives the frame loop: turns keyboard and mouse input into ACTION events,
emits one TICK per display refresh, renders the playfield and draws the HUD
and message prompt around it.
"""

import pygame
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from ..core.events import EventBus, EventType, Event, action_event, tick_event
from ..game.session import RideSession, Prompt
from ..game.wave import Playfield
from ..graphics.renderer import WaveRenderer
from .display import PlayfieldDisplay

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Game window configuration."""
    title: str = "Pocket Surf"
    fullscreen: bool = False
    fps: int = 60

    # Playfield pixels are drawn at this multiple
    scale: int = 2

    margin: int = 20
    title_height: int = 40
    panel_width: int = 240

    # Colors
    bg_color: tuple[int, int, int] = (12, 20, 32)
    panel_color: tuple[int, int, int] = (28, 40, 58)
    text_color: tuple[int, int, int] = (210, 222, 235)
    accent_color: tuple[int, int, int] = (90, 200, 230)
    muted_color: tuple[int, int, int] = (110, 124, 140)


class SimulatorWindow:
    """
    Desktop window hosting one ride session.

    Keyboard Mapping:
        SPACE / RETURN: Action (start, pump, retry)
        Mouse click: Action on the playfield or the prompt button
        D: Toggle debug panel
        S: Capture screenshot
        ESC / Q: Exit
    """

    def __init__(
        self,
        playfield: Playfield,
        config: Optional[WindowConfig] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.config = config or WindowConfig()
        self.event_bus = event_bus or EventBus()
        self.display = PlayfieldDisplay(playfield.width, playfield.height)

        # Attached once init() has found a drawing surface
        self.session: Optional[RideSession] = None
        self.renderer: Optional[WaveRenderer] = None

        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._font: Optional[pygame.font.Font] = None
        self._small_font: Optional[pygame.font.Font] = None
        self._title_font: Optional[pygame.font.Font] = None
        self._running = False
        self._frame_count = 0
        self._show_debug = False

        self._layout: dict[str, pygame.Rect] = {}
        self._calculate_layout()

        logger.info("SimulatorWindow created")

    @property
    def size(self) -> tuple[int, int]:
        cfg = self.config
        width = cfg.margin * 3 + self.display.width * cfg.scale + cfg.panel_width
        height = cfg.title_height + self.display.height * cfg.scale + cfg.margin * 2
        return width, height

    def init(self) -> bool:
        """Initialize pygame and open the window.

        Returns:
            True if a drawing surface is available, False otherwise
        """
        try:
            pygame.init()
            pygame.display.set_caption(self.config.title)

            flags = pygame.DOUBLEBUF
            if self.config.fullscreen:
                flags |= pygame.FULLSCREEN

            self._screen = pygame.display.set_mode(self.size, flags)
            self._clock = pygame.time.Clock()

            pygame.font.init()
            self._font = pygame.font.Font(None, 24)
            self._small_font = pygame.font.Font(None, 18)
            self._title_font = pygame.font.Font(None, 36)
        except pygame.error as e:
            logger.error(f"No drawing surface available: {e}")
            pygame.quit()
            return False

        logger.info(f"Pygame initialized: {self.size[0]}x{self.size[1]}")
        return True

    def attach(self, session: RideSession, renderer: WaveRenderer) -> None:
        """Hand the window the session it hosts and the renderer that draws it."""
        self.session = session
        self.renderer = renderer
        logger.debug(f"Session attached ({session.playfield.width}x{session.playfield.height})")

    def _calculate_layout(self) -> None:
        """Calculate positions for all UI elements."""
        cfg = self.config
        field_w = self.display.width * cfg.scale
        field_h = self.display.height * cfg.scale

        playfield = pygame.Rect(cfg.margin, cfg.title_height, field_w, field_h)

        prompt_w = min(field_w - 40, 420)
        prompt_h = 150
        prompt = pygame.Rect(0, 0, prompt_w, prompt_h)
        prompt.center = playfield.center

        button = pygame.Rect(0, 0, 160, 36)
        button.midbottom = (prompt.centerx, prompt.bottom - 16)

        self._layout = {
            "playfield": playfield,
            "prompt": prompt,
            "button": button,
            "hud": pygame.Rect(playfield.right + cfg.margin, cfg.title_height, cfg.panel_width, field_h),
        }

    # Input

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            self._handle_event(event)

    def _handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self._running = False

        elif event.type == pygame.KEYDOWN:
            self._handle_keydown(event)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._handle_click(event.pos)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._running = False
        elif key in (pygame.K_SPACE, pygame.K_RETURN):
            self.event_bus.emit(action_event(source="keyboard"))
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug
        elif key == pygame.K_s:
            self._capture_screenshot()

    def _handle_click(self, pos: tuple[int, int]) -> None:
        if self.session is None:
            return

        prompt = self.session.prompt
        if prompt is not None and self._layout["prompt"].collidepoint(pos):
            # The message box covers the playfield; only its button acts
            if self._layout["button"].collidepoint(pos) and not prompt.disabled:
                self.event_bus.emit(action_event(source="button"))
            return

        if self._layout["playfield"].collidepoint(pos):
            self.event_bus.emit(action_event(source="pointer"))

    # Rendering

    def _render(self, time_ms: float) -> None:
        """Render all UI elements."""
        if not self._screen or self.session is None:
            return

        self._screen.fill(self.config.bg_color)

        state = self.session.state
        self.renderer.draw(
            self.display.buffer,
            state.scroll,
            state.settings,
            state.surfer.position,
            time_ms,
        )
        self._screen.blit(self.display.render(self.config.scale), self._layout["playfield"].topleft)

        prompt = self.session.prompt
        if prompt is not None:
            self._render_prompt(prompt)

        self._render_hud()
        self._render_title_bar()

        pygame.display.flip()

    def _render_prompt(self, prompt: Prompt) -> None:
        rect = self._layout["prompt"]
        button = self._layout["button"]

        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill((6, 14, 26, 220))
        self._screen.blit(overlay, rect.topleft)
        pygame.draw.rect(self._screen, self.config.accent_color, rect, 2, border_radius=8)

        title = self._title_font.render(prompt.title, True, self.config.text_color)
        self._screen.blit(title, title.get_rect(midtop=(rect.centerx, rect.y + 14)))

        body = self._font.render(prompt.body, True, self.config.text_color)
        self._screen.blit(body, body.get_rect(midtop=(rect.centerx, rect.y + 52)))

        fill_color = self.config.panel_color if prompt.disabled else self.config.accent_color
        pygame.draw.rect(self._screen, fill_color, button, border_radius=6)
        label_color = self.config.muted_color if prompt.disabled else self.config.bg_color
        label = self._font.render(prompt.button_label, True, label_color)
        self._screen.blit(label, label.get_rect(center=button.center))

    def _render_hud(self) -> None:
        rect = self._layout["hud"]
        pygame.draw.rect(self._screen, self.config.panel_color, rect, border_radius=5)

        hud = self.session.hud()
        rows = [
            ("Level", str(hud.level)),
            ("Time", hud.timer),
            ("Score", str(hud.score)),
            ("State", hud.status),
            ("Pocket", hud.pocket),
            ("Speed", hud.speed),
        ]

        y = rect.y + 14
        for name, value in rows:
            name_surf = self._small_font.render(name.upper(), True, self.config.muted_color)
            value_surf = self._font.render(value, True, self.config.text_color)
            self._screen.blit(name_surf, (rect.x + 14, y))
            self._screen.blit(value_surf, (rect.x + 14, y + 14))
            y += 44

        if self._show_debug:
            self._render_debug(rect, y + 6)

    def _render_debug(self, rect: pygame.Rect, y: int) -> None:
        state = self.session.state
        lines = [
            f"FPS: {self._clock.get_fps():.1f}" if self._clock else "FPS: --",
            f"Frame: {self._frame_count}",
            f"y={state.surfer.y:.1f} v={state.surfer.velocity:.1f}",
            f"scroll={state.scroll:.0f} barrel={state.barrel_bonus:.2f}s",
            "",
        ]
        for event in self.event_bus.get_history(limit=5):
            lines.append(f"{event.type.name} <{event.source}>")

        for line in lines:
            surf = self._small_font.render(line, True, self.config.accent_color)
            self._screen.blit(surf, (rect.x + 14, y))
            y += 16

    def _render_title_bar(self) -> None:
        title = f"{self.config.title} | {self.session.state.status.label}"
        surf = self._font.render(title, True, self.config.accent_color)
        self._screen.blit(surf, (self.config.margin, 12))

    def _capture_screenshot(self) -> None:
        """Capture and save a screenshot."""
        if self._screen:
            filename = f"screenshot_{self._frame_count}.png"
            pygame.image.save(self._screen, filename)
            logger.info(f"Screenshot saved: {filename}")

    # Loop

    async def run(self) -> None:
        """Main frame loop. Call init() first."""
        if self._screen is None:
            raise RuntimeError("SimulatorWindow.run() called before a successful init()")
        if self.session is None or self.renderer is None:
            raise RuntimeError("SimulatorWindow.run() called before attach()")

        self._running = True
        logger.info("Game loop started")

        try:
            while self._running:
                self._handle_events()

                now_ms = float(pygame.time.get_ticks())
                self.event_bus.emit(tick_event(now_ms, self._frame_count))

                self._render(now_ms)

                if self._clock:
                    self._clock.tick(self.config.fps)

                self._frame_count += 1

                # Yield to other tasks
                await asyncio.sleep(0)
        finally:
            self.event_bus.emit(Event(EventType.SHUTDOWN, source="window"))
            self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Game loop stopped")

    def stop(self) -> None:
        """Stop the loop after the current frame."""
        self._running = False

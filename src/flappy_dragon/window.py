"""
window.py: pygame frame driver.

Opens a window sized to the console grid, samples one key per frame, hands the
console to the game state and paints the resulting cells.
"""

import logging
from typing import Dict, Iterable, Optional, Tuple

import pygame

from .console import Color, Console, Key
from .constants import (
    CELL_HEIGHT, CELL_WIDTH, FONT_SIZE, RENDER_FPS, SCREEN_HEIGHT, SCREEN_WIDTH,
    WINDOW_TITLE
)
from .game_state import State

logger = logging.getLogger(__name__)

KEY_MAP: Dict[int, Key] = {
    pygame.K_SPACE: Key.SPACE,
    pygame.K_p: Key.P,
    pygame.K_q: Key.Q,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_RETURN: Key.RETURN,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


class BackendError(Exception):
    """The window or font could not be created."""


def poll_input(events: Iterable[pygame.event.Event]) -> Tuple[Optional[Key], bool]:
    """
    Reduces one frame's events to (key, closed).
    The last recognised key press wins; unmapped keys are dropped.
    """
    key = None
    closed = False
    for event in events:
        if event.type == pygame.QUIT:
            closed = True
        elif event.type == pygame.KEYDOWN and event.key in KEY_MAP:
            key = KEY_MAP[event.key]
    return key, closed


class Window:
    def __init__(self, screen: pygame.Surface, font: pygame.font.Font, console: Console, fps: int):
        self.screen = screen
        self.font = font
        self.console = console
        self.fps = fps
        self.clock = pygame.time.Clock()
        self._glyphs: Dict[Tuple[str, Color], pygame.Surface] = {}

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        surface = self._glyphs.get((glyph, fg))
        if surface is None:
            surface = self.font.render(glyph, True, fg)
            self._glyphs[(glyph, fg)] = surface
        return surface

    def draw(self):
        """Paints every console cell onto the window."""
        console = self.console
        for y in range(console.height):
            for x in range(console.width):
                cell = console.cell(x, y)
                rect = pygame.Rect(x * CELL_WIDTH, y * CELL_HEIGHT, CELL_WIDTH, CELL_HEIGHT)
                self.screen.fill(cell.bg, rect)
                if cell.glyph != " ":
                    surface = self._glyph(cell.glyph, cell.fg)
                    self.screen.blit(surface, surface.get_rect(center=rect.center))
        pygame.display.flip()


class WindowBuilder:
    """Collects window settings, then opens the window with build()."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.title = WINDOW_TITLE
        self.fps = RENDER_FPS

    @classmethod
    def simple80x50(cls) -> "WindowBuilder":
        return cls(SCREEN_WIDTH, SCREEN_HEIGHT)

    def with_title(self, title: str) -> "WindowBuilder":
        self.title = title
        return self

    def with_fps(self, fps: int) -> "WindowBuilder":
        self.fps = fps
        return self

    def build(self) -> Window:
        try:
            pygame.init()
            screen = pygame.display.set_mode((self.width * CELL_WIDTH, self.height * CELL_HEIGHT))
            pygame.display.set_caption(self.title)
            font = pygame.font.Font(None, FONT_SIZE)
        except pygame.error as e:
            pygame.quit()
            raise BackendError(f"Could not open window: {e}") from e

        logger.info("Opened %dx%d window '%s'", self.width, self.height, self.title)
        return Window(screen, font, Console(self.width, self.height), self.fps)


def main_loop(window: Window, state: State):
    """Runs frames until the game asks to quit or the window is closed."""
    console = window.console
    window.clock.tick(window.fps)
    try:
        while True:
            frame_time_ms = window.clock.tick(window.fps)
            key, closed = poll_input(pygame.event.get())
            if closed:
                logger.info("Window closed")
                break

            console.begin_frame(float(frame_time_ms), key)
            state.tick(console)
            if console.quitting:
                break

            window.draw()
    finally:
        pygame.quit()
        logger.info("Window shut down")

"""
console.py: The per-frame drawing surface and input snapshot handed to the game.

The console is a plain cell buffer; the pygame driver in window.py fills in the
frame input and paints the buffer. Nothing here touches pygame.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple

from .constants import BLACK, SCREEN_HEIGHT, SCREEN_WIDTH, WHITE

Color = Tuple[int, int, int]


class Key(Enum):
    """Keys the driver reports to the game."""
    SPACE = auto()
    P = auto()
    Q = auto()
    ESCAPE = auto()
    RETURN = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


@dataclass
class Cell:
    glyph: str = " "
    fg: Color = WHITE
    bg: Color = BLACK


class Console:
    """
    Fixed-size grid of character cells plus the input of the current frame.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        self.width = width
        self.height = height
        self.frame_time_ms = 0.0
        self.key: Optional[Key] = None
        self.quitting = False
        self._cells: List[Cell] = [Cell() for _ in range(width * height)]

    def begin_frame(self, frame_time_ms: float, key: Optional[Key]):
        """Loads the elapsed time and key press for the frame about to run."""
        self.frame_time_ms = frame_time_ms
        self.key = key

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        return self._cells[y * self.width + x]

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str):
        """Draws one glyph. Coordinates outside the grid are ignored."""
        if not self.in_bounds(x, y):
            return
        self._cells[y * self.width + x] = Cell(glyph, fg, bg)

    def cls(self):
        self.cls_bg(BLACK)

    def cls_bg(self, color: Color):
        """Clears every cell to a blank on the given background."""
        self._cells = [Cell(" ", WHITE, color) for _ in range(self.width * self.height)]

    def print(self, x: int, y: int, text: str):
        """Writes text left-aligned from (x, y), clipped at the right edge."""
        for offset, ch in enumerate(text):
            self.set(x + offset, y, WHITE, BLACK, ch)

    def print_centered(self, y: int, text: str):
        self.print((self.width - len(text)) // 2, y, text)

    def row_text(self, y: int) -> str:
        return "".join(self.cell(x, y).glyph for x in range(self.width))

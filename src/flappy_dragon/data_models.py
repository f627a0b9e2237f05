"""
data_models.py: The player and obstacle, with their physics and drawing.
"""

import random
from dataclasses import dataclass

from .console import Console
from .constants import (
    BLACK, FLAP_VELOCITY, GAP_Y_MAX, GAP_Y_MIN, GRAVITY_STEP, MAX_FALL_VELOCITY,
    MAX_GAP_SIZE, MIN_GAP_SIZE, OBSTACLE_GLYPH, PLAYER_GLYPH, PLAYER_SCREEN_X,
    RED, SCREEN_HEIGHT, YELLOW
)


@dataclass
class Player:
    """The dragon. x is world-space distance travelled, y is the screen row."""
    x: int
    y: int
    velocity: float = 0.0

    def gravity_and_move(self):
        """
        One physics tick: accelerate downward up to the velocity cap, fall by
        the truncated velocity, and advance one world column.
        """
        if self.velocity < MAX_FALL_VELOCITY:
            self.velocity = min(self.velocity + GRAVITY_STEP, MAX_FALL_VELOCITY)

        self.y += int(self.velocity)
        if self.y < 0:
            self.y = 0

        self.x += 1

    def flap(self):
        self.velocity = FLAP_VELOCITY

    def render(self, ctx: Console):
        ctx.set(PLAYER_SCREEN_X, self.y, YELLOW, BLACK, PLAYER_GLYPH)


@dataclass
class Obstacle:
    """A wall with a gap, placed in world-space."""
    x: int
    gap_y: int
    size: int

    @classmethod
    def new(cls, x: int, score: int, rng: random.Random) -> "Obstacle":
        """Creates an obstacle whose gap narrows as the score grows."""
        return cls(
            x=x,
            gap_y=rng.randrange(GAP_Y_MIN, GAP_Y_MAX),
            size=max(MIN_GAP_SIZE, MAX_GAP_SIZE - score),
        )

    @property
    def half_size(self) -> int:
        return self.size // 2

    def render(self, ctx: Console, player_x: int):
        screen_x = self.x - player_x

        # Top wall
        for y in range(0, self.gap_y - self.half_size):
            ctx.set(screen_x, y, RED, BLACK, OBSTACLE_GLYPH)

        # Bottom wall
        for y in range(self.gap_y + self.half_size, SCREEN_HEIGHT):
            ctx.set(screen_x, y, RED, BLACK, OBSTACLE_GLYPH)

    def hit_obstacle(self, player: Player) -> bool:
        # Only the tick where x matches exactly is tested, so this depends on
        # the player advancing exactly one column per physics tick.
        does_x_match = player.x == self.x
        player_above_gap = player.y < self.gap_y - self.half_size
        player_below_gap = player.y > self.gap_y + self.half_size
        return does_x_match and (player_above_gap or player_below_gap)

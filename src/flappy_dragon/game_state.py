"""
game_state.py: The Menu / Playing / End controller driven once per frame.
"""

import logging
import random
from enum import Enum
from typing import Optional

from .console import Console, Key
from .constants import (
    FRAME_DURATION, NAVY, PLAYER_START_X, PLAYER_START_Y, SCREEN_HEIGHT, SCREEN_WIDTH
)
from .data_models import Obstacle, Player

logger = logging.getLogger(__name__)


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    END = "end"


class State:
    """
    Owns the player, the current obstacle and the score.
    The frame driver calls tick() exactly once per rendered frame.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.player = Player(PLAYER_START_X, PLAYER_START_Y)
        self.frame_time = 0.0
        self.obstacle = Obstacle.new(SCREEN_WIDTH, 0, self.rng)
        self.mode = GameMode.MENU
        self.score = 0

    def restart(self):
        """Starts a fresh round: new player, new obstacle, zeroed score."""
        self.player = Player(PLAYER_START_X, PLAYER_START_Y)
        self.frame_time = 0.0
        self.obstacle = Obstacle.new(SCREEN_WIDTH, 0, self.rng)
        self.mode = GameMode.PLAYING
        self.score = 0
        logger.info("Round started")

    def _handle_menu_key(self, ctx: Console):
        if ctx.key == Key.P:
            self.restart()
        elif ctx.key == Key.Q:
            logger.info("Quit requested from %s", self.mode.value)
            ctx.quitting = True

    def main_menu(self, ctx: Console):
        ctx.cls()
        ctx.print_centered(5, "Welcome to Flappy Dragon")
        ctx.print_centered(8, "(P) Play Game")
        ctx.print_centered(9, "(Q) Quit Game")
        self._handle_menu_key(ctx)

    def dead(self, ctx: Console):
        ctx.cls()
        ctx.print_centered(5, "You are dead!")
        ctx.print_centered(6, f"You earned {self.score} points")
        ctx.print_centered(8, "(P) Play Again")
        ctx.print_centered(9, "(Q) Quit Game")
        self._handle_menu_key(ctx)

    def play(self, ctx: Console):
        ctx.cls_bg(NAVY)

        # Physics runs on its own cadence; rendering happens every frame.
        self.frame_time += ctx.frame_time_ms
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self.player.gravity_and_move()

        if ctx.key == Key.SPACE:
            self.player.flap()

        self.player.render(ctx)
        ctx.print(0, 0, "Press SPACE to flap.")
        ctx.print(0, 1, f"Score: {self.score}")

        self.obstacle.render(ctx, self.player.x)
        if self.player.x > self.obstacle.x:
            self.score += 1
            self.obstacle = Obstacle.new(self.player.x + SCREEN_WIDTH, self.score, self.rng)
            logger.debug("Obstacle passed, score %d, next gap size %d",
                         self.score, self.obstacle.size)

        if self.player.y > SCREEN_HEIGHT or self.obstacle.hit_obstacle(self.player):
            self.mode = GameMode.END
            logger.info("Round over with %d points", self.score)

    def tick(self, ctx: Console):
        if self.mode == GameMode.MENU:
            self.main_menu(ctx)
        elif self.mode == GameMode.END:
            self.dead(ctx)
        elif self.mode == GameMode.PLAYING:
            self.play(ctx)

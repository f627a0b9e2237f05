"""
constants.py: Centralized configuration for the game and its window.
"""

# -------- Window Config --------
WINDOW_TITLE = "Flappy Dragon"
SCREEN_WIDTH = 80               # Console width in cells
SCREEN_HEIGHT = 50              # Console height in cells
CELL_WIDTH = 10                 # Pixels per cell, horizontally
CELL_HEIGHT = 14                # Pixels per cell, vertically
FONT_SIZE = 18
RENDER_FPS = 60

# Time synchronization
FRAME_DURATION = 75.0           # Milliseconds between physics ticks

# -------- Player Config --------
PLAYER_START_X = 5
PLAYER_START_Y = 25
GRAVITY_STEP = 0.2              # Velocity gained per physics tick
MAX_FALL_VELOCITY = 2.0
FLAP_VELOCITY = -2.0
PLAYER_SCREEN_X = 0             # Player is always drawn in the first column

# -------- Obstacle Config --------
GAP_Y_MIN = 10                  # Inclusive
GAP_Y_MAX = 40                  # Exclusive
MAX_GAP_SIZE = 20               # Gap height at score 0
MIN_GAP_SIZE = 2

# -------- Colors (RGB) --------
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
NAVY = (0, 0, 128)

# -------- Glyphs --------
PLAYER_GLYPH = "@"
OBSTACLE_GLYPH = "|"

"""
constants.py: Centralized configuration for game, physics and window settings.
"""

import os

# -------- Window Config --------
SCREEN_WIDTH = 380
SCREEN_HEIGHT = 676
WINDOW_TITLE = "Flappy Bird"
FRAME_RATE_LIMIT = 120
TEXTURE_SCALE = 1.33            # Applied to every sprite
CLEAR_COLOR = (255, 255, 255)

# -------- Timing Config (milliseconds) --------
# Every per-ms rate below is tuned against integer millisecond frame deltas.
PIPE_SPAWN_INTERVAL = 3.0       # seconds
SCORE_INTERVAL = 5.0            # seconds since the last reset

# -------- Player Config --------
PLAYER_SPAWN_X = 100.0
PLAYER_SPAWN_Y = 100.0
PLAYER_WIDTH = 45.0             # Hitbox
PLAYER_HEIGHT = 32.0
INITIAL_FORCE = 3.0
JUMP_FORCE = 4.0
GRAVITY_DECAY = 0.01            # Lift force lost per ms

# -------- Terrain Config --------
TERRAIN_SPEED = 0.1             # Leftward drift (pixels/ms)
PIPE_WIDTH = 70.0               # Hitbox
PIPE_HEIGHT = 425.0
PIPE_X = 400.0                  # Upright pipe spawn offset
INVERTED_PIPE_X = 469.0         # Inverted pipe spawn offset
PIPE_ANCHOR_MIN = 210           # Inclusive
PIPE_ANCHOR_MAX = 450           # Inclusive
PIPE_GAP = 200.0
PURGE_X = -500.0                # Terrain left of this is removed

GROUND_Y = 550.0
GROUND_START_X = 0.0
GROUND_SPACING = 336.0          # x of each appended ground segment
GROUND_RESPAWN_X = -48.0

# -------- Bounds Config --------
FLOOR_Y = 520.0
CEILING_Y = -100.0

# -------- HUD Config --------
SCORE_POSITION = (180, 50)
SCORE_FONT_SIZE = 50
SCORE_COLOR = (255, 255, 255)

# -------- Asset Config --------
ASSETS_DIR = os.environ.get(
    "FLAPPY_ASSETS", os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets"))
BACKGROUND_FILE = "bg.png"
BIRD_FILE = "bird.png"
PIPE_FILE = "pipe.png"
GROUND_FILE = "ground.png"
FONT_FILE = "timesbd.ttf"

LOG_LEVEL = os.environ.get("FLAPPY_LOG_LEVEL", "INFO").upper()

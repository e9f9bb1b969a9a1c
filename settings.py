import sys
from pathlib import Path

# Game Variables
GAME_WIDTH = 400
GAME_HEIGHT = 600

# Check if running in web browser
IS_WEB = sys.platform == "emscripten"
ROOT = Path(__file__).parent
ASSETS = ROOT / "assets"
SAVE_FILE = ROOT / "best_score.json"
BEST_SCORE_KEY = "bestScore"

# bird
bird_x = GAME_WIDTH * 0.1
bird_y = GAME_HEIGHT / 2
bird_width = 44
bird_height = 34

GRAVITY = 600         # units/s^2
FLAP_VELOCITY = 300   # units/s, applied upward

# pipes
pipe_width = 52
pipe_height = GAME_HEIGHT
PIPES_TO_RENDER = 4
PIPE_VELOCITY = 200   # units/s, leftward
PIPE_MARGIN = 20      # keeps the opening off the top and bottom edge

# timers (ms)
RESTART_DELAY_MS = 1000
COUNTDOWN_STEP_MS = 1000
COUNTDOWN_FROM = 3

FPS = 60

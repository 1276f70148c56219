# Canvas
CANVAS_SIZE = (800, 600)           # px, logical play area
BORDER = 8                         # px, colored frame around the canvas

# Spawning / difficulty
INITIAL_DIFFICULTY = 1.0           # delay multiplier at start
BASE_DELAY_MS = 1000               # spawn delay at difficulty 1.0
DECAY_RATE = 0.98                  # delay multiplier per spawn
MIN_DELAY_MS = 100                 # delay never drops to or below this via decay
CAPACITY = 20                      # live martians that end the game

# Targets
TARGET_SIZE = (50, 50)             # px
ENEMY_ASSET = "enemy.png"

# Presentation
REDRAW_INTERVAL_MS = 100
FPS = 60
BG_COLOR = (255, 255, 255)
GAME_OVER_COLOR = (255, 0, 0)
GAME_OVER_TEXT_COLOR = (0, 0, 0)
SCORE_FONT_SIZE = 28
GAME_OVER_FONT_SIZE = 26
LINE_HEIGHT = 24

# Game configuration defaults for Checkbox Snake.
# Every value can be overridden through the GameEngine / view constructors.

# Board
DEFAULT_GRID_SIZE = 30   # cells per row (the board is square)
MIN_GRID_SIZE = 10       # smaller boards are clamped up to this

# Timing
DEFAULT_SPEED = 60       # minimum milliseconds between two game steps

# Difficulty controls how many pieces of food are on the board at once
MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5
DEFAULT_DIFFICULTY = 1

# Initial snake, head first
START_BODY = (1, 0)

# Display
CELL_PX = 20             # size of one checkbox cell in pixels
CELL_MARGIN = 3          # padding inside a cell around the box
HUD_HEIGHT = 64          # space under the board for the score and message lines
FPS = 120                # frame rate of the window loop

# Colors (R, G, B)
BACKGROUND = (245, 245, 245)
BOX_BORDER = (110, 110, 120)
BOX_FILL = (255, 255, 255)
CHECK_FILL = (0, 117, 255)
TEXT = (20, 20, 20)

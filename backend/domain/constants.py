"""
Game constants for the snake simulation.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Screen coordinates: y grows downward
DIR_DELTA = {
    UP:    (0, -1),
    DOWN:  (0,  1),
    LEFT:  (-1, 0),
    RIGHT: (1,  0),
}

# Results of a single snake step
CONTINUE = "CONTINUE"
GREW = "GREW"
COLLIDED = "COLLIDED"

# End reasons
SELF_COLLISION = "self_collision"
BOARD_FULL = "board_full"

# Game settings
DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 300
DEFAULT_CELL_SIZE = 15
DEFAULT_UPS = 10
DEFAULT_MAX_TICKS = 1000
DEFAULT_MAX_PLACEMENT_ATTEMPTS = 1000

# Display colors
SNAKE_COLOR = "#FF0000"
FOOD_COLOR = "#00FF00"
BACKGROUND_COLOR = "#FFFFFF"

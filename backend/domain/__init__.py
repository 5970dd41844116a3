"""
Domain entities for the snake simulation core.

This module contains the grid math and game entities that are independent
of rendering, input polling and timing concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE,
    CONTINUE, GREW, COLLIDED,
    SELF_COLLISION, BOARD_FULL,
)
from .grid import Cell, wrap, random_cell, validate_grid, all_cells, cells_along, cell_index
from .snake import Snake
from .food import Food
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE',
    'CONTINUE', 'GREW', 'COLLIDED',
    'SELF_COLLISION', 'BOARD_FULL',
    'Cell', 'wrap', 'random_cell', 'validate_grid', 'all_cells', 'cells_along', 'cell_index',
    'Snake',
    'Food',
    'GameState',
]

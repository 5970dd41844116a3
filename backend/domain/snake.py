"""
Snake entity for the simulation core.
"""

import logging
from collections import deque
from typing import Iterable, Tuple

from .constants import (
    RIGHT, VALID_MOVES, OPPOSITE, DIR_DELTA,
    CONTINUE, GREW, COLLIDED,
    SNAKE_COLOR,
)
from .grid import Cell, wrap

logger = logging.getLogger(__name__)


class Snake:
    """
    The player-controlled snake.

    Attributes:
        positions: deque of Cells from head at index 0 to tail at the end
        size: side length of one segment, equal to the grid cell size
        direction: current heading, one of UP, DOWN, LEFT, RIGHT
        color: hex display color, passed through to the renderer
    """

    def __init__(
        self,
        positions: Iterable[Tuple[float, float]],
        size: float,
        direction: str = RIGHT,
        color: str = SNAKE_COLOR
    ):
        self.positions = deque(Cell(*pos) for pos in positions)
        if not self.positions:
            raise ValueError("Snake must be created with at least one segment")
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction!r}")

        self.size = size
        self.direction = direction
        self.color = color

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def occupies(self, cell: Tuple[float, float]) -> bool:
        """True if any segment sits exactly on ``cell``."""
        return Cell(*cell) in self.positions

    def set_direction(self, requested: str) -> bool:
        """
        Turn towards ``requested`` unless it would reverse the snake.

        Returns True if the heading changed.
        """
        if requested not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {requested!r}")
        if requested == OPPOSITE[self.direction]:
            logger.debug(f"Ignoring reversal from {self.direction} to {requested}")
            return False

        changed = requested != self.direction
        self.direction = requested
        return changed

    def next_head(self, width: float, height: float) -> Cell:
        """The cell the head would move into on the next step."""
        dx, dy = DIR_DELTA[self.direction]
        x = wrap(self.head.x + dx * self.size, width, self.size)
        y = wrap(self.head.y + dy * self.size, height, self.size)
        return Cell(x, y)

    def advance(
        self,
        food_position: Tuple[float, float],
        width: float,
        height: float
    ) -> str:
        """
        Move one cell in the current direction.

        Returns:
            COLLIDED if the new head lands on the body (the body is left
            untouched), GREW if it lands on the food (the tail is kept),
            CONTINUE otherwise (the tail is dropped).
        """
        new_head = self.next_head(width, height)

        if self.occupies(new_head):
            return COLLIDED

        self.positions.appendleft(new_head)

        if new_head == Cell(*food_position):
            return GREW

        self.positions.pop()
        return CONTINUE

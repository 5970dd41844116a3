"""
Food entity for the simulation core.
"""

import logging
import random
from typing import Optional, Tuple

from .constants import FOOD_COLOR, DEFAULT_MAX_PLACEMENT_ATTEMPTS
from .grid import Cell, random_cell, all_cells
from .snake import Snake

logger = logging.getLogger(__name__)


class Food:
    """
    The single consumable on the board.

    Attributes:
        position: Cell the food currently occupies
        size: side length of the food square
        color: hex display color, passed through to the renderer
    """

    def __init__(
        self,
        position: Tuple[float, float],
        size: float,
        color: str = FOOD_COLOR
    ):
        self.position = Cell(*position)
        self.size = size
        self.color = color

    def relocate(
        self,
        width: float,
        height: float,
        cell_size: float,
        snake: Snake,
        rng: Optional[random.Random] = None,
        max_attempts: int = DEFAULT_MAX_PLACEMENT_ATTEMPTS
    ) -> bool:
        """
        Move the food to a random cell the snake does not occupy.

        Candidates are drawn with random_cell() up to ``max_attempts`` times.
        If every draw lands on the snake, a free cell is picked from the
        whole grid instead.

        Returns:
            False if the snake covers every cell of the grid. The food is
            left where it was in that case.
        """
        rng = rng or random

        for _ in range(max_attempts):
            candidate = random_cell(width, height, cell_size, rng)
            if not snake.occupies(candidate):
                self.position = candidate
                return True

        logger.warning(
            f"No free cell found after {max_attempts} random attempts, "
            f"scanning the grid"
        )
        free_cells = [
            cell for cell in all_cells(width, height, cell_size)
            if not snake.occupies(cell)
        ]
        if not free_cells:
            return False

        self.position = rng.choice(free_cells)
        return True

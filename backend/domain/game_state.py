"""
GameState entity - a read-only snapshot of the simulation for rendering.
"""

from typing import List, Optional, Tuple

from .grid import cell_index, cells_along


class GameState:
    """
    A snapshot of the game at a specific tick.

    Attributes:
        tick: number of ticks applied so far
        snake_positions: list of (x, y) cells, head first
        snake_size, snake_color: display attributes of the snake
        food_position: (x, y) cell of the food
        food_size, food_color: display attributes of the food
        width, height, cell_size: grid extent
        direction: the snake's current heading
        ended: whether the game has reached its terminal state
        end_reason: why the game ended, None while running
    """

    def __init__(
        self,
        tick: int,
        snake_positions: List[Tuple[float, float]],
        snake_size: float,
        snake_color: str,
        food_position: Tuple[float, float],
        food_size: float,
        food_color: str,
        width: float,
        height: float,
        cell_size: float,
        direction: str,
        ended: bool = False,
        end_reason: Optional[str] = None
    ):
        self.tick = tick
        self.snake_positions = snake_positions
        self.snake_size = snake_size
        self.snake_color = snake_color
        self.food_position = food_position
        self.food_size = food_size
        self.food_color = food_color
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.direction = direction
        self.ended = ended
        self.end_reason = end_reason

    @property
    def length(self) -> int:
        return len(self.snake_positions)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head
        One character per cell, (0,0) at the top left.
        """
        cols = cells_along(self.width, self.cell_size)
        rows = cells_along(self.height, self.cell_size)
        board = [['.' for _ in range(cols)] for _ in range(rows)]

        fx, fy = self.food_position
        board[cell_index(fy, self.cell_size)][cell_index(fx, self.cell_size)] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake_positions):
            board[cell_index(y, self.cell_size)][cell_index(x, self.cell_size)] = 'H' if pos_idx == 0 else 'S'

        return "\n".join(' '.join(row) for row in board)

    def __repr__(self):
        status = f"ended ({self.end_reason})" if self.ended else "running"
        return (
            f"<GameState tick={self.tick}, length={self.length}, "
            f"food={self.food_position}, {status}>"
        )

"""
Random player implementation - presses random safe keys.
"""

import random
from typing import List, Optional

from domain.constants import DIR_DELTA, OPPOSITE, VALID_MOVES
from domain.grid import Cell, wrap
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random input source that prefers directions which don't end the game.

    On each frame it presses a key with probability ``turn_probability``,
    or always when going straight would hit the body.
    """

    def __init__(self, turn_probability: float = 0.2, rng: Optional[random.Random] = None):
        self.turn_probability = turn_probability
        self.rng = rng or random.Random()

    def _next_cell(self, game_state: GameState, move: str) -> Cell:
        head_x, head_y = game_state.snake_positions[0]
        dx, dy = DIR_DELTA[move]
        size = game_state.snake_size
        return Cell(
            wrap(head_x + dx * size, game_state.width, size),
            wrap(head_y + dy * size, game_state.height, size),
        )

    def get_move(self, game_state: GameState) -> Optional[str]:
        body = [Cell(*pos) for pos in game_state.snake_positions]
        current = game_state.direction

        straight_is_safe = self._next_cell(game_state, current) not in body
        if straight_is_safe and self.rng.random() >= self.turn_probability:
            return None

        # Reversing is never accepted by the game, so don't offer it
        candidates = sorted(VALID_MOVES - {OPPOSITE[current]})
        safe_moves: List[str] = [
            move for move in candidates
            if self._next_cell(game_state, move) not in body
        ]

        # If no safe moves, press anything (the game ends either way)
        if not safe_moves:
            return self.rng.choice(candidates)

        return self.rng.choice(safe_moves)

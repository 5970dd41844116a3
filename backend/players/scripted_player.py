"""
Scripted player - replays a fixed sequence of input events.
"""

from typing import Iterable, Optional

from domain.game_state import GameState
from .base import Player


class ScriptedPlayer(Player):
    """
    Emits one recorded event per tick, then goes quiet.

    ``None`` entries stand for frames without a key press. Events are
    passed through unchecked so non-directional input reaches the game
    exactly as recorded.
    """

    def __init__(self, moves: Iterable[Optional[str]]):
        self.moves = list(moves)
        self.index = 0

    def get_move(self, game_state: GameState) -> Optional[str]:
        if self.index >= len(self.moves):
            return None
        move = self.moves[self.index]
        self.index += 1
        return move

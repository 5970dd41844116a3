"""
Base player interface for the simulation driver.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    Each player looks at the current snapshot and decides whether a
    direction key is pressed during this frame.
    """

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return a direction event for this frame.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", or None when no key is pressed
        """
        raise NotImplementedError

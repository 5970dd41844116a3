"""
Input sources for the snake simulation.

A player stands in for the keyboard: once per tick it may emit one
directional event for the driver to deliver to the game.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
]

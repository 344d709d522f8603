"""
Player package.

player_core owns the entity; movement, combat and state live in
sibling modules as plain functions taking the player.
"""

from .player_core import Player
from .player_state import PlayerState, Direction

__all__ = ['Player', 'PlayerState', 'Direction']

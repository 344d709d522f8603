"""
player_state.py
---------------
Player-exclusive state enumerations.
"""

from enum import IntEnum


class PlayerState(IntEnum):
    """Animation/behaviour state of the player."""
    IDLE = 0
    RUNNING = 1
    ATTACKING = 2

    @property
    def sheet_name(self) -> str:
        """Name used in sprite sheet file names and config keys."""
        return _SHEET_NAMES[self]


class Direction(IntEnum):
    """Facing direction of the player."""
    DOWN = 0
    UP = 1
    LEFT = 2
    RIGHT = 3

    @property
    def sheet_name(self) -> str:
        return self.name.lower()


_SHEET_NAMES = {
    PlayerState.IDLE: "idle",
    PlayerState.RUNNING: "run",
    PlayerState.ATTACKING: "attack",
}

"""
player_movement.py
------------------
Translates directional input into movement and facing.

Keys are checked in a fixed W, S, A, D order; every held key moves the
player on its axis and the last held key in that order decides the facing.
"""

from diablolike.entities.player.player_state import PlayerState, Direction


MOVE_ORDER = (
    ("move_up", 0, -1, Direction.UP),
    ("move_down", 0, 1, Direction.DOWN),
    ("move_left", -1, 0, Direction.LEFT),
    ("move_right", 1, 0, Direction.RIGHT),
)


def update_movement(player, snapshot) -> bool:
    """
    Move the player for one tick and pick RUNNING or IDLE.

    Args:
        player (Player): The player being moved.
        snapshot (InputSnapshot): This tick's input.

    Returns:
        bool: True if any directional action was held.
    """
    moved = False
    for action, dx, dy, direction in MOVE_ORDER:
        if snapshot.is_held(action):
            player.pos.x += dx * player.speed
            player.pos.y += dy * player.speed
            player.direction = direction
            moved = True

    player.set_state(PlayerState.RUNNING if moved else PlayerState.IDLE)
    return moved

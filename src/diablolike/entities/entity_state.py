"""
entity_state.py
---------------
Lifecycle states shared by every world entity.
"""

from enum import IntEnum


class LifecycleState(IntEnum):
    """
    Tracks the life/death progression of an entity.
    DEAD entities are dropped from the world on the next update pass.
    """
    ALIVE = 0
    DEAD = 1

"""
Entity module exports.

Exports:
    LifecycleState - Entity life/death progression (ALIVE, DEAD)
    BaseEntity     - Shared position/health base for player and enemies
"""

from diablolike.entities.entity_state import LifecycleState
from diablolike.entities.base_entity import BaseEntity

__all__ = [
    'LifecycleState',
    'BaseEntity',
]

"""
base_entity.py
--------------
Foundational class for living world entities (Player, Enemy).

Coordinate System
-----------------
- self.pos is the entity's centre in world coordinates
- Sprites are drawn centred on self.pos through the camera transform
- Speeds are world units per tick
"""

import pygame

from diablolike.core.debug.debug_logger import DebugLogger
from diablolike.entities.entity_state import LifecycleState


class BaseEntity:
    """Position, health and lifecycle shared by the player and enemies."""

    __slots__ = ('pos', 'speed', 'health', 'max_health', 'death_state', 'layer')

    def __init__(self, x: float, y: float, speed: float = 1.0, health: int = 1, layer: int = 0):
        self.pos = pygame.Vector2(x, y)
        self.speed = speed
        self.health = health
        self.max_health = health
        self.death_state = LifecycleState.ALIVE
        self.layer = layer

    # ===================================================================
    # Properties
    # ===================================================================

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    @property
    def dead(self) -> bool:
        return self.death_state == LifecycleState.DEAD

    # ===================================================================
    # Lifecycle
    # ===================================================================

    def take_damage(self, amount: int) -> bool:
        """
        Reduce health and mark dead once it reaches zero.

        Returns:
            bool: True only for the hit that killed the entity.
        """
        if self.dead:
            return False

        self.health -= amount
        if self.health <= 0:
            self.health = 0
            self.mark_dead()
            return True
        return False

    def mark_dead(self):
        if self.dead:
            return
        self.death_state = LifecycleState.DEAD
        DebugLogger.state(f"[{type(self).__name__}] -> DEAD", category="combat")

    # ===================================================================
    # Utilities
    # ===================================================================

    def distance_to(self, other: "BaseEntity") -> float:
        return self.pos.distance_to(other.pos)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} "
            f"pos=({self.pos.x:.1f}, {self.pos.y:.1f}) "
            f"hp={self.health}/{self.max_health} "
            f"state={self.death_state.name}>"
        )

"""
spawn_manager.py
----------------
Time-gated enemy factories placed in the world.

Responsibilities
----------------
- Count ticks and emit one enemy every `interval` ticks
- Pick uniformly among the configured enemy templates
- Jitter the spawn point slightly so enemies do not stack
- Stop for good once `max_enemies` have been produced
"""

import random

from diablolike.core.debug.debug_logger import DebugLogger
from diablolike.core.runtime.game_settings import EnemySettings


class Spawner:
    """Emits enemies at a fixed point until its quota is used up."""

    def __init__(self, x, y, interval, max_enemies, templates, rng=None,
                 jitter=EnemySettings.SPAWN_JITTER):
        """
        Args:
            x, y: Spawn point
            interval: Ticks between spawns
            max_enemies: Total enemies this spawner will ever produce
            templates: Sequence of EnemyTemplate to choose from
            rng: random.Random used for template choice and jitter
            jitter: Offsets are integers in [-jitter, jitter)
        """
        if not templates:
            raise ValueError("Spawner needs at least one enemy template")

        self.x = x
        self.y = y
        self.interval = interval
        self.max_enemies = max_enemies
        self.templates = list(templates)
        self.rng = rng or random.Random()
        self.jitter = jitter

        self.timer = 0
        self.spawned = 0

    @property
    def exhausted(self) -> bool:
        return self.spawned >= self.max_enemies

    def tick(self, world):
        """
        Advance the spawn timer by one tick.

        Returns:
            Enemy | None: The enemy added to the world this tick, if any.
        """
        if self.exhausted:
            return None

        self.timer += 1
        if self.timer < self.interval:
            return None

        self.timer = 0
        self.spawned += 1

        template = self.rng.choice(self.templates)
        x = self.x + self.rng.randrange(-self.jitter, self.jitter)
        y = self.y + self.rng.randrange(-self.jitter, self.jitter)
        enemy = template.create(x, y)
        world.add_enemy(enemy)

        DebugLogger.system(
            f"Spawned {template.name} at ({x:.0f}, {y:.0f}) [{self.spawned}/{self.max_enemies}]",
            category="entity_spawn"
        )
        if self.exhausted:
            DebugLogger.state(f"Spawner at ({self.x}, {self.y}) exhausted", category="entity_spawn")
        return enemy

    def __repr__(self):
        return (
            f"<Spawner pos=({self.x}, {self.y}) timer={self.timer}/{self.interval} "
            f"spawned={self.spawned}/{self.max_enemies}>"
        )

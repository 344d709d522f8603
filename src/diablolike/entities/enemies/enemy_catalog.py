"""
enemy_catalog.py
----------------
Enemy templates loaded from enemies.json and the factory that turns a
template into a live Enemy.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from diablolike.core.debug.debug_logger import DebugLogger
from diablolike.core.services.config_manager import load_config
from diablolike.entities.enemies.base_enemy import Enemy


@dataclass(frozen=True)
class EnemyTemplate:
    """Static description of one enemy kind."""
    name: str
    health: int
    speed: float = 1.0
    frame_delay: int = 7
    frames: tuple = field(default=(), repr=False)

    def create(self, x: float, y: float) -> Enemy:
        return Enemy(
            x, y,
            speed=self.speed,
            health=self.health,
            frames=self.frames,
            frame_delay=self.frame_delay,
            enemy_type=self.name,
        )


def load_enemy_templates(frame_loader: Optional[Callable[[dict], List]] = None,
                         config: Optional[Dict] = None) -> Dict[str, EnemyTemplate]:
    """
    Build the template table.

    Args:
        frame_loader: Callable taking a raw template dict and returning its
            frames. None leaves templates frameless (headless use).
        config: Pre-loaded enemies config; read from enemies.json if None.

    Returns:
        {name: EnemyTemplate} in file order
    """
    if config is None:
        config = load_config("enemies.json", {"templates": {}})

    templates = {}
    for name, raw in config.get("templates", {}).items():
        if "hp" not in raw:
            raise ValueError(f"enemies.json: template '{name}' has no 'hp'")
        frames = tuple(frame_loader(raw)) if frame_loader else ()
        templates[name] = EnemyTemplate(
            name=name,
            health=int(raw["hp"]),
            speed=float(raw.get("speed", 1.0)),
            frame_delay=int(raw.get("frame_delay", 7)),
            frames=frames,
        )

    DebugLogger.init_sub(f"Enemy templates: {', '.join(templates) or 'none'}")
    return templates

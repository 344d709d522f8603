"""
base_enemy.py
-------------
Enemy entity: walks straight at the player and dies when its health runs out.

Responsibilities
----------------
- Seek the target position at a fixed speed (no pathfinding or steering)
- Loop its animation frames
- Report the killing blow exactly once (via take_damage's return value)
"""

from diablolike.core.debug.debug_logger import DebugLogger
from diablolike.core.runtime.game_settings import EnemySettings, Layers
from diablolike.entities.base_entity import BaseEntity
from diablolike.graphics.animations.frame_animator import FrameAnimator


class Enemy(BaseEntity):
    """A single hostile creature."""

    __slots__ = ('enemy_type', 'frames', 'animator')

    def __init__(self, x, y, speed=1.0, health=1, frames=None,
                 frame_delay=7, enemy_type="enemy"):
        """
        Args:
            x, y: Spawn position
            speed: World units moved per tick
            health: Hit points
            frames: Looping animation frames (may be empty)
            frame_delay: Ticks per animation frame
            enemy_type: Template name, used for logs and events
        """
        super().__init__(x, y, speed=speed, health=health, layer=Layers.ENEMIES)
        self.enemy_type = enemy_type
        self.frames = list(frames or ())
        self.animator = FrameAnimator(frame_delay)

    # ===========================================================
    # Update Logic
    # ===========================================================

    def update(self, target_x: float, target_y: float):
        """Step toward the target and advance the looping animation."""
        if self.dead:
            return

        dx = target_x - self.pos.x
        dy = target_y - self.pos.y
        dist = (dx * dx + dy * dy) ** 0.5

        # Inside the arrive radius: hold position instead of jittering around the target
        if dist > EnemySettings.ARRIVE_DISTANCE:
            self.pos.x += dx / dist * self.speed
            self.pos.y += dy / dist * self.speed

        self.animator.advance_loop(len(self.frames))

    # ===========================================================
    # Rendering
    # ===========================================================

    def current_frame(self):
        if not self.frames:
            return None
        return self.frames[self.animator.frame_index]

    def draw(self, draw_manager, camera):
        frame = self.current_frame()
        if frame is None:
            DebugLogger.warn_once(
                ("enemy_frames", self.enemy_type),
                f"No frames for enemy '{self.enemy_type}', skipping draw",
                category="animation"
            )
            return
        draw_manager.queue_sprite(frame, self.pos.x, self.pos.y, camera, self.layer)

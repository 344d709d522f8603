"""
player_core.py
--------------
Defines the Player entity core used to coordinate movement, combat and
animation components.
"""

from diablolike.core.debug.debug_logger import DebugLogger
from diablolike.core.runtime.game_settings import Layers
from diablolike.entities.base_entity import BaseEntity
from diablolike.graphics.animations.frame_animator import FrameAnimator
from .player_combat import try_attack
from .player_config import DEFAULT_CONFIG, REQUIRED_SECTIONS
from .player_movement import update_movement
from .player_state import PlayerState, Direction


class Player(BaseEntity):
    """Represents the controllable player entity."""

    __slots__ = (
        'cfg', 'animations', 'animator', 'state', 'direction',
        'attack_cooldown', 'attack_timer', 'attack_range', 'damage_cooldown',
    )

    def __init__(self, x=None, y=None, animations=None, cfg=None):
        """
        Args:
            x, y: Spawn position (defaults to the config's spawn point)
            animations: {PlayerState: {Direction: [frames]}}
            cfg: Player config dict (DEFAULT_CONFIG if None)
        """
        cfg = cfg if cfg is not None else DEFAULT_CONFIG
        missing = [s for s in REQUIRED_SECTIONS if s not in cfg]
        if missing:
            DebugLogger.fail(f"player.json missing required sections: {missing}", category="loading")
            raise ValueError(f"Invalid player.json: missing {missing}")
        self.cfg = cfg

        core = cfg["core_attributes"]
        spawn = cfg.get("spawn", {})
        x = spawn.get("x", 0) if x is None else x
        y = spawn.get("y", 0) if y is None else y

        super().__init__(x, y, speed=core["speed"], health=core["health"], layer=Layers.PLAYER)

        # Animation
        self.animations = animations or {}
        self.animator = FrameAnimator(cfg["animation"].get("frame_delay", 5))
        self.state = PlayerState.IDLE
        self.direction = Direction.DOWN

        # Combat
        self.attack_cooldown = core["attack_cooldown"]
        self.attack_timer = 0
        self.attack_range = core["attack_range"]
        self.damage_cooldown = 0

        DebugLogger.init_entry("Player")
        DebugLogger.init_sub(f"Spawned at ({x}, {y}) | HP={self.health} | Range={self.attack_range}")

    # ===========================================================
    # State Machine
    # ===========================================================

    def set_state(self, state: PlayerState):
        """Switch state; the frame sequence restarts on every transition."""
        if state == self.state:
            return
        DebugLogger.trace(f"{self.state.name} -> {state.name}", category="animation")
        self.state = state
        self.animator.reset()

    def frame_count(self, state=None, direction=None) -> int:
        state = self.state if state is None else state
        direction = self.direction if direction is None else direction
        return len(self.animations.get(state, {}).get(direction, ()))

    def update(self, snapshot, world):
        """
        Advance the player by one tick.

        Args:
            snapshot (InputSnapshot): This tick's input
            world (World): Enemies and floating texts the attack touches
        """
        if self.attack_timer > 0:
            self.attack_timer -= 1
        if self.damage_cooldown > 0:
            self.damage_cooldown -= 1

        if self.dead:
            return

        if self.state != PlayerState.ATTACKING:
            update_movement(self, snapshot)

        if snapshot.is_held("attack"):
            try_attack(self, world)

        self._advance_animation()

    def _advance_animation(self):
        frame_count = self.frame_count()
        if self.state == PlayerState.ATTACKING:
            if self.animator.advance_once(frame_count):
                self.set_state(PlayerState.IDLE)
        else:
            self.animator.advance_loop(frame_count)

    @property
    def attack_just_started(self) -> bool:
        """True on the tick right after an attack began."""
        return (
            self.state == PlayerState.ATTACKING
            and self.attack_timer == self.attack_cooldown - 1
        )

    # ===========================================================
    # Rendering
    # ===========================================================

    def current_frame(self):
        frames = self.animations.get(self.state, {}).get(self.direction)
        if not frames:
            return None
        return frames[self.animator.frame_index % len(frames)]

    def draw(self, draw_manager, camera):
        frame = self.current_frame()
        if frame is None:
            DebugLogger.warn_once(
                ("player_frames", self.state, self.direction),
                f"No player frames for {self.state.name}/{self.direction.name}, skipping draw",
                category="animation"
            )
            return
        draw_manager.queue_sprite(frame, self.pos.x, self.pos.y, camera, self.layer)

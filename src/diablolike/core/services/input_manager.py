"""
input_manager.py
----------------
Keyboard and pointer polling with edge detection.

The InputManager is polled exactly once per tick at the loop boundary and
hands out an immutable InputSnapshot. Entity logic only ever reads the
snapshot, never pygame's input state directly.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

import pygame

from diablolike.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_up": [pygame.K_w],
    "move_down": [pygame.K_s],
    "move_left": [pygame.K_a],
    "move_right": [pygame.K_d],
    "attack": [pygame.K_SPACE],
    "toggle_inventory": [pygame.K_TAB],
    "zoom_in": [pygame.K_q],
    "zoom_out": [pygame.K_e],
    "debug_add_item": [pygame.K_p],
    "debug_damage": [pygame.K_h],
}

POINTER_BUTTON = 0  # index into pygame.mouse.get_pressed()


# ===========================================================
# Snapshot
# ===========================================================

@dataclass(frozen=True)
class InputSnapshot:
    """
    Input state for a single tick.

    held: actions whose keys are down this tick
    pressed: actions that went down this tick (rising edge)
    pointer: pointer position in game coordinates
    pointer_held / pointer_pressed: primary button state and rising edge
    """
    held: FrozenSet[str] = field(default_factory=frozenset)
    pressed: FrozenSet[str] = field(default_factory=frozenset)
    pointer: Tuple[int, int] = (0, 0)
    pointer_held: bool = False
    pointer_pressed: bool = False

    def is_held(self, action: str) -> bool:
        return action in self.held

    def was_pressed(self, action: str) -> bool:
        return action in self.pressed

    @classmethod
    def from_actions(cls, *held, pointer=(0, 0), pointer_pressed=False):
        """Build a snapshot where every held action is also a fresh press."""
        actions = frozenset(held)
        return cls(
            held=actions,
            pressed=actions,
            pointer=pointer,
            pointer_held=pointer_pressed,
            pointer_pressed=pointer_pressed,
        )


EMPTY_INPUT = InputSnapshot()


# ===========================================================
# Input Manager
# ===========================================================

class InputManager:
    """
    Polls pygame and produces InputSnapshot values.

    Usage:
        snapshot = input_manager.capture()
        world.update(snapshot)
    """

    def __init__(self, key_bindings=None):
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._prev_held = frozenset()
        self._prev_pointer_held = False
        DebugLogger.init_entry("InputManager")

    def capture(self) -> InputSnapshot:
        """Poll keyboard and pointer once and return this tick's snapshot."""
        keys = pygame.key.get_pressed()
        pointer_held = bool(pygame.mouse.get_pressed()[POINTER_BUTTON])
        pointer = pygame.mouse.get_pos()
        return self.build_snapshot(keys, pointer, pointer_held)

    def build_snapshot(self, keys, pointer, pointer_held) -> InputSnapshot:
        """
        Turn raw key state into a snapshot with edge detection.

        Args:
            keys: Sequence indexable by key code (pygame.key.get_pressed())
            pointer: (x, y) pointer position
            pointer_held: Whether the primary pointer button is down
        """
        held = frozenset(
            action for action in self.key_bindings
            if self._is_action_down(action, keys)
        )
        pressed = held - self._prev_held
        pointer_pressed = pointer_held and not self._prev_pointer_held

        if pressed:
            DebugLogger.trace(f"Pressed: {sorted(pressed)}", category="input")

        self._prev_held = held
        self._prev_pointer_held = pointer_held

        return InputSnapshot(
            held=held,
            pressed=pressed,
            pointer=(int(pointer[0]), int(pointer[1])),
            pointer_held=pointer_held,
            pointer_pressed=pointer_pressed,
        )

    def _is_action_down(self, action: str, keys) -> bool:
        for key in self.key_bindings.get(action, ()):
            if keys[key]:
                return True
        return False

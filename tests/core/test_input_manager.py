"""
test_input_manager.py
---------------------
Tests for InputSnapshot edge detection.
"""

import pygame
import pytest

from diablolike.core.services.input_manager import InputManager, InputSnapshot


class Keys:
    """Indexable key state like pygame.key.get_pressed()."""

    def __init__(self, *down):
        self.down = set(down)

    def __getitem__(self, key):
        return key in self.down


@pytest.fixture
def manager():
    return InputManager()


def test_press_is_reported_on_first_tick_only(manager):
    first = manager.build_snapshot(Keys(pygame.K_p), (0, 0), False)
    second = manager.build_snapshot(Keys(pygame.K_p), (0, 0), False)

    assert first.was_pressed("debug_add_item")
    assert second.is_held("debug_add_item")
    assert not second.was_pressed("debug_add_item")


def test_release_and_repress_fires_again(manager):
    manager.build_snapshot(Keys(pygame.K_SPACE), (0, 0), False)
    manager.build_snapshot(Keys(), (0, 0), False)
    snap = manager.build_snapshot(Keys(pygame.K_SPACE), (0, 0), False)

    assert snap.was_pressed("attack")


def test_pointer_rising_edge(manager):
    down = manager.build_snapshot(Keys(), (10, 20), True)
    still_down = manager.build_snapshot(Keys(), (11, 21), True)

    assert down.pointer_pressed
    assert not still_down.pointer_pressed
    assert still_down.pointer == (11, 21)


def test_wasd_map_to_move_actions(manager):
    snap = manager.build_snapshot(Keys(pygame.K_w, pygame.K_d), (0, 0), False)
    assert snap.held == frozenset({"move_up", "move_right"})


def test_custom_bindings():
    manager = InputManager({"attack": [pygame.K_j]})
    snap = manager.build_snapshot(Keys(pygame.K_j, pygame.K_SPACE), (0, 0), False)
    assert snap.held == frozenset({"attack"})


def test_snapshot_is_immutable():
    snap = InputSnapshot.from_actions("attack")
    with pytest.raises(AttributeError):
        snap.held = frozenset()

"""
conftest.py
-----------
Shared pytest configuration and fixtures for diablolike tests.

Contains:
- Headless SDL setup so pygame runs without a window
- Common fixtures for players, enemies, worlds and inventories
- Pytest configuration and hooks
"""

import os
import random
import sys
from unittest.mock import MagicMock

# Headless pygame: must be set before pygame initialises a video driver
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add src directory to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from diablolike.core.services.input_manager import InputSnapshot
from diablolike.core.runtime.world import World
from diablolike.entities.enemies.base_enemy import Enemy
from diablolike.entities.items.item import Item
from diablolike.entities.player.player_config import DEFAULT_CONFIG
from diablolike.entities.player.player_core import Player
from diablolike.entities.player.player_state import PlayerState, Direction
from diablolike.systems.inventory.inventory import Inventory


# ===========================================================
# Helpers
# ===========================================================

def make_animations(frame_count=3):
    """Placeholder frame table; entity logic only ever indexes the lists."""
    return {
        state: {direction: [f"{state.sheet_name}_{direction.sheet_name}_{i}" for i in range(frame_count)]
                for direction in Direction}
        for state in PlayerState
    }


def held(*actions, pointer=(0, 0), pointer_pressed=False):
    """Snapshot with the given actions held (and freshly pressed)."""
    return InputSnapshot.from_actions(*actions, pointer=pointer, pointer_pressed=pointer_pressed)


def click(x, y):
    return InputSnapshot(pointer=(x, y), pointer_held=True, pointer_pressed=True)


def make_item(item_id="potion-0", quantity=1, max_stack=5, name="Health Potion"):
    return Item(item_id=item_id, name=name, quantity=quantity, max_stack=max_stack,
                description="Restores 50 HP")


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def player():
    """Player at (400, 300) with 3-frame animations for every state."""
    return Player(400, 300, animations=make_animations(3), cfg=DEFAULT_CONFIG)


@pytest.fixture
def inventory():
    return Inventory()


@pytest.fixture
def world(player):
    """World with no enemies, no spawners and a seeded RNG."""
    return World(player, rng=random.Random(0), item_catalog={
        "potion-0": {"name": "Health Potion", "description": "Restores 50 HP",
                     "max_stack": 5, "icon_color": [200, 0, 0]},
    })


@pytest.fixture
def enemy_factory():
    def _make(x=410, y=300, health=3, speed=1.0):
        return Enemy(x, y, speed=speed, health=health, frames=["f0", "f1"], enemy_type="bat")
    return _make


@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with the queue methods entities use."""
    draw_manager = MagicMock()
    draw_manager.queue_draw = MagicMock()
    draw_manager.queue_shape = MagicMock()
    draw_manager.queue_text = MagicMock()
    draw_manager.queue_sprite = MagicMock()
    return draw_manager


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: drives a whole World through several ticks")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything not explicitly integration as unit."""
    for item in items:
        if item.get_closest_marker("integration") is None:
            item.add_marker(pytest.mark.unit)

"""
player_config.py
----------------
Player configuration loading with default fallbacks.

The player always spawns even if player.json is missing or incomplete.
"""

from diablolike.core.services.config_manager import load_config

# ===========================================================
# Default Fallback Configuration
# ===========================================================
DEFAULT_CONFIG = {
    "core_attributes": {
        "speed": 2.5,             # World units per tick
        "health": 10,
        "attack_cooldown": 20,    # Ticks between attacks
        "attack_range": 40.0,     # Melee reach (world units)
    },
    "spawn": {"x": 400, "y": 300},
    "animation": {
        "sheet_pattern": "player/{state}_{direction}.png",
        "frame_width": 96,
        "frame_height": 80,
        "frame_delay": 5,
        "frame_counts": {"idle": 8, "run": 8, "attack": 8},
    },
}

REQUIRED_SECTIONS = ("core_attributes", "animation")


def load_player_config():
    """Load player.json merged over DEFAULT_CONFIG."""
    return load_config("player.json", DEFAULT_CONFIG)

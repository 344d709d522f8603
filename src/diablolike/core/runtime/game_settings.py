"""
game_settings.py
----------------
Centralized constants for all game systems.

Per-tick values (speeds, cooldowns, lifetimes) are expressed in ticks of
the fixed-step loop, not in seconds.
"""


# ===========================================================
# Display & Timing
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 800
    HEIGHT: int = 600
    FPS: int = 60
    CAPTION: str = "2D Diablo-Like"
    BACKGROUND = (255, 255, 255)


class Physics:
    """Fixed-step update timing."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Assets
# ===========================================================

class Assets:
    ROOT: str = "assets"
    FONT_NAME: str = "monospace"
    FONT_SIZE: int = 13
    TEXT_SHADOW = (0, 0, 0)


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    ENEMIES: int = 300
    PLAYER: int = 400
    EFFECTS: int = 450
    FLOATING_TEXT: int = 500
    UI: int = 600
    TOOLTIP: int = 700
    HUD: int = 800


# ===========================================================
# Camera
# ===========================================================

class CameraSettings:
    START_ZOOM: float = 2.0
    MIN_ZOOM: float = 0.1
    ZOOM_STEP: float = 0.01


# ===========================================================
# Combat
# ===========================================================

class Combat:
    """Enemy contact damage and hit feedback."""
    CONTACT_RANGE: float = 20.0
    CONTACT_DAMAGE: int = 1
    CONTACT_COOLDOWN: int = 30
    HIT_DAMAGE: int = 1
    TEXT_LIFETIME: int = 60
    TEXT_RISE: float = 0.5
    PLAYER_TEXT_OFFSET: float = 10.0
    ENEMY_TEXT_COLOR = (255, 255, 255)
    PLAYER_TEXT_COLOR = (255, 0, 0)
    RANGE_CIRCLE_COLOR = (255, 0, 0, 100)


# ===========================================================
# Enemies
# ===========================================================

class EnemySettings:
    ARRIVE_DISTANCE: float = 1.0
    SPAWN_JITTER: int = 20


# ===========================================================
# Inventory
# ===========================================================

class InventorySettings:
    TOGGLE_COOLDOWN: int = 15
    SLOT_COLOR = (40, 40, 40)
    TOOLTIP_COLOR = (0, 0, 0, 200)
    NAME_COLOR = (255, 255, 255)
    DESCRIPTION_COLOR = (180, 180, 180)


# ===========================================================
# HUD
# ===========================================================

class Hud:
    HP_BAR_POS = (10, 24)
    HP_BAR_SIZE = (100, 10)
    HP_BACK_COLOR = (120, 0, 0)
    HP_FILL_COLOR = (0, 200, 0)
    TEXT_COLOR = (0, 0, 0)


# ===========================================================
# Debug
# ===========================================================

class Debug:
    """Developer hotkeys (P adds a test item, H hurts the player)."""
    HOTKEYS_ENABLED: bool = True
    SELF_DAMAGE: int = 1

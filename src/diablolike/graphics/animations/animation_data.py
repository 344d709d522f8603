"""
animation_data.py
-----------------
Builds frame tables for the player and enemy templates.

Every sheet is decoded once and cached by (path, frame_count, size), so
spawners can create enemies every few seconds without touching the disk.
Any load failure propagates as AssetLoadError.
"""

import os

from diablolike.core.debug.debug_logger import DebugLogger
from diablolike.core.runtime.game_settings import Assets
from diablolike.entities.player.player_state import PlayerState, Direction
from diablolike.graphics.sprite_sheet import load_sprite_sheet

_FRAME_CACHE = {}  # {(path, count, w, h): [Surface, ...]}


def get_frames(path, frame_count, frame_width, frame_height):
    """Load (or reuse) the frames of one sprite sheet."""
    key = (path, frame_count, frame_width, frame_height)
    if key not in _FRAME_CACHE:
        _FRAME_CACHE[key] = load_sprite_sheet(path, frame_count, frame_width, frame_height)
    return _FRAME_CACHE[key]


def clear_cache():
    _FRAME_CACHE.clear()


def load_player_animations(anim_cfg: dict, asset_root: str = Assets.ROOT):
    """
    Build {PlayerState: {Direction: [frames]}} from the player animation config.

    States without an entry in "frame_counts" are left out entirely; the
    player skips drawing them instead of failing at runtime.

    Args:
        anim_cfg: The "animation" section of player.json
        asset_root: Directory the sheet pattern is resolved against
    """
    pattern = anim_cfg["sheet_pattern"]
    frame_w = anim_cfg["frame_width"]
    frame_h = anim_cfg["frame_height"]
    frame_counts = anim_cfg["frame_counts"]

    animations = {}
    for state in PlayerState:
        count = frame_counts.get(state.sheet_name)
        if not count:
            DebugLogger.warn(f"No player frames configured for '{state.sheet_name}'", category="loading")
            continue

        animations[state] = {}
        for direction in Direction:
            path = os.path.join(asset_root, pattern.format(
                state=state.sheet_name, direction=direction.sheet_name
            ))
            animations[state][direction] = get_frames(path, count, frame_w, frame_h)

    DebugLogger.init_entry("Player Animations")
    return animations


def load_enemy_frames(template: dict, asset_root: str = Assets.ROOT):
    """Frames for one enemy template from enemies.json."""
    sheet = template["sheet"]
    return get_frames(
        os.path.join(asset_root, sheet["path"]),
        sheet["frame_count"],
        sheet["frame_width"],
        sheet["frame_height"],
    )

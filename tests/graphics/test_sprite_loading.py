"""
test_sprite_loading.py
----------------------
Tests for sprite sheet slicing, the frame cache and player animation tables.
"""

import pygame
import pytest

from diablolike.entities.player.player_state import PlayerState, Direction
from diablolike.graphics.animations import animation_data
from diablolike.graphics.sprite_sheet import AssetLoadError, load_sprite_sheet, slice_sprite_sheet


@pytest.fixture(autouse=True)
def fresh_cache():
    animation_data.clear_cache()
    yield
    animation_data.clear_cache()


def write_sheet(path, width, height, color=(0, 128, 255)):
    surface = pygame.Surface((width, height))
    surface.fill(color)
    pygame.image.save(surface, str(path))
    return str(path)


# ===========================================================
# Slicing
# ===========================================================

def test_slice_cuts_horizontal_strip():
    sheet = pygame.Surface((48, 16))
    frames = slice_sprite_sheet(sheet, 3, 16, 16)

    assert len(frames) == 3
    assert all(f.get_size() == (16, 16) for f in frames)
    assert frames[2].get_offset() == (32, 0)


def test_slice_past_sheet_edge_raises():
    sheet = pygame.Surface((40, 16))
    with pytest.raises(AssetLoadError):
        slice_sprite_sheet(sheet, 3, 16, 16)


# ===========================================================
# Loading
# ===========================================================

def test_load_sprite_sheet_from_disk(tmp_path):
    path = write_sheet(tmp_path / "bat.bmp", 128, 32)
    frames = load_sprite_sheet(path, 4, 32, 32)

    assert len(frames) == 4
    assert frames[0].get_size() == (32, 32)


def test_missing_sheet_raises_asset_load_error(tmp_path):
    with pytest.raises(AssetLoadError):
        load_sprite_sheet(str(tmp_path / "missing.bmp"), 4, 32, 32)


def test_frames_are_decoded_once(tmp_path):
    path = write_sheet(tmp_path / "slime.bmp", 176, 32)

    first = animation_data.get_frames(path, 11, 16, 32)
    second = animation_data.get_frames(path, 11, 16, 32)

    assert first is second


def test_enemy_frames_resolve_against_asset_root(tmp_path):
    (tmp_path / "slime").mkdir()
    write_sheet(tmp_path / "slime" / "green.bmp", 176, 32)
    template = {"sheet": {"path": "slime/green.bmp", "frame_count": 11,
                          "frame_width": 16, "frame_height": 32}}

    frames = animation_data.load_enemy_frames(template, asset_root=str(tmp_path))
    assert len(frames) == 11


def test_player_animations_cover_configured_states(tmp_path):
    for state in ("idle", "run"):
        for direction in Direction:
            write_sheet(tmp_path / f"{state}_{direction.sheet_name}.bmp", 16, 8)

    anim_cfg = {
        "sheet_pattern": "{state}_{direction}.bmp",
        "frame_width": 8,
        "frame_height": 8,
        "frame_counts": {"idle": 2, "run": 2},
    }
    animations = animation_data.load_player_animations(anim_cfg, asset_root=str(tmp_path))

    assert set(animations) == {PlayerState.IDLE, PlayerState.RUNNING}
    assert set(animations[PlayerState.IDLE]) == set(Direction)
    assert len(animations[PlayerState.RUNNING][Direction.LEFT]) == 2

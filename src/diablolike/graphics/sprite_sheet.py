"""
sprite_sheet.py
---------------
Loads sprite sheets and slices them into evenly sized frames.

Sheets are laid out as a single horizontal strip: frame i occupies
(i * frame_width, 0, frame_width, frame_height).
"""

import pygame

from diablolike.core.debug.debug_logger import DebugLogger


class AssetLoadError(RuntimeError):
    """Raised when a required image cannot be loaded or sliced."""


def load_sprite_sheet(path, frame_count, frame_width, frame_height):
    """
    Decode an image file and cut it into frames.

    Raises:
        AssetLoadError: The file is missing, undecodable, or smaller than
            frame_count * frame_width by frame_height.
    """
    try:
        sheet = pygame.image.load(path)
    except (pygame.error, FileNotFoundError) as e:
        raise AssetLoadError(f"failed to load {path}: {e}") from e

    if pygame.display.get_surface() is not None:
        sheet = sheet.convert_alpha()

    frames = slice_sprite_sheet(sheet, frame_count, frame_width, frame_height, source=path)
    DebugLogger.system(
        f"Loaded {path} ({frame_count} frames @ {frame_width}x{frame_height})",
        category="loading"
    )
    return frames


def slice_sprite_sheet(sheet, frame_count, frame_width, frame_height, source="<sheet>"):
    """Cut a loaded sheet into frame_count subsurfaces."""
    frames = []
    for i in range(frame_count):
        rect = pygame.Rect(i * frame_width, 0, frame_width, frame_height)
        try:
            frames.append(sheet.subsurface(rect))
        except ValueError as e:
            raise AssetLoadError(
                f"{source}: frame {i} {tuple(rect)} outside sheet {sheet.get_size()}"
            ) from e
    return frames

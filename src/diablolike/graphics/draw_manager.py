"""
draw_manager.py
---------------
Layered, immediate-mode rendering queue.

Responsibilities:
- Maintain layered draw queue (surfaces, shapes, text)
- Apply the camera transform for world-space sprites
- Render queued items in layer order to the target surface
"""

import pygame

from diablolike.core.debug.debug_logger import DebugLogger
from diablolike.core.runtime.game_settings import Assets, Display


class DrawManager:
    """Collects draw calls during World.draw() and flushes them once per frame."""

    def __init__(self):
        self.layers = {}            # {layer: [(kind, payload), ...]}
        self._layer_keys_cache = []
        self._layers_dirty = False

        self._font = None
        self._scaled_cache = {}     # {(id(surface), w, h): Surface}
        self._scaled_zoom = None

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for new frame."""
        for items in self.layers.values():
            items.clear()

    def _queue(self, layer, kind, payload):
        if layer not in self.layers:
            self.layers[layer] = []
            self._layers_dirty = True
        self.layers[layer].append((kind, payload))

    def queue_draw(self, surface, dest, layer=0):
        """
        Queue a surface for drawing.

        Args:
            surface: pygame.Surface to draw
            dest: Top-left position or Rect
            layer: Render layer (lower = first)
        """
        if surface is None or dest is None:
            DebugLogger.warn(f"Skipped invalid draw call at layer {layer}", category="render")
            return
        self._queue(layer, "surface", (surface, dest))

    def queue_shape(self, shape_type, rect, color, layer=0, **kwargs):
        """Queue a primitive shape ("rect" or "circle"). RGBA colors are blended."""
        self._queue(layer, "shape", (shape_type, rect, color, kwargs))

    def queue_text(self, text, pos, color, layer=0, alpha=1.0):
        """Queue fixed-width text at a screen position."""
        if alpha <= 0:
            return
        self._queue(layer, "text", (str(text), pos, color, alpha))

    def queue_sprite(self, surface, world_x, world_y, camera, layer=0):
        """Queue a sprite centred on a world position, scaled by the camera zoom."""
        if surface is None:
            return
        if camera.zoom != self._scaled_zoom:
            self._scaled_cache.clear()
            self._scaled_zoom = camera.zoom

        w, h = surface.get_size()
        size = (max(1, int(w * camera.zoom)), max(1, int(h * camera.zoom)))
        key = (id(surface), size)
        scaled = self._scaled_cache.get(key)
        if scaled is None:
            scaled = surface if size == (w, h) else pygame.transform.scale(surface, size)
            self._scaled_cache[key] = scaled

        sx, sy = camera.world_to_screen(world_x, world_y)
        self.queue_draw(scaled, (sx - size[0] / 2, sy - size[1] / 2), layer)

    # ===========================================================
    # Rendering
    # ===========================================================

    @property
    def font(self):
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.SysFont(Assets.FONT_NAME, Assets.FONT_SIZE)
        return self._font

    def render(self, target_surface):
        """Render all queued items to target surface in layer order."""
        target_surface.fill(Display.BACKGROUND)

        if self._layers_dirty:
            self._layer_keys_cache = sorted(self.layers)
            self._layers_dirty = False

        for layer in self._layer_keys_cache:
            for kind, payload in self.layers[layer]:
                if kind == "surface":
                    target_surface.blit(*payload)
                elif kind == "shape":
                    self._draw_shape(target_surface, *payload)
                elif kind == "text":
                    self._draw_text(target_surface, *payload)

    def _draw_shape(self, surface, shape_type, rect, color, kwargs):
        rect = pygame.Rect(rect)
        width = kwargs.get("width", 0)

        # Alpha colors go through a temporary per-pixel-alpha surface
        if len(color) == 4:
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            self._draw_shape(overlay, shape_type, overlay.get_rect(), color[:3], kwargs)
            overlay.set_alpha(color[3])
            surface.blit(overlay, rect.topleft)
            return

        if shape_type == "rect":
            pygame.draw.rect(surface, color, rect, width)
        elif shape_type == "circle":
            pygame.draw.circle(surface, color, rect.center, rect.width // 2, width)
        else:
            DebugLogger.warn(f"Unknown shape type: {shape_type}", category="render")

    def _draw_text(self, surface, text, pos, color, alpha):
        # 1-px shadow keeps light text readable on the light background
        shadow = self.font.render(text, True, Assets.TEXT_SHADOW)
        rendered = self.font.render(text, True, color)
        if alpha < 1.0:
            shadow.set_alpha(int(255 * alpha))
            rendered.set_alpha(int(255 * alpha))
        x, y = pos
        surface.blit(shadow, (x + 1, y + 1))
        surface.blit(rendered, (x, y))

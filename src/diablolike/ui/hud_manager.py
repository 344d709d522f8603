"""
hud_manager.py
--------------
Screen-space overlay drawn on top of the world.

Responsibilities
----------------
- Player health bar (top-left)
- Debug line with player position and camera zoom
- Kill counter fed by SessionStats
"""

from diablolike.core.runtime.game_settings import Hud, Layers


class HUDManager:
    """Queues the HUD elements every frame; holds no state of its own."""

    def draw(self, draw_manager, player, camera, stats):
        self._draw_debug_line(draw_manager, player, camera)
        self._draw_health_bar(draw_manager, player)
        draw_manager.queue_text(
            f"Kills: {stats.enemies_killed}",
            (Hud.HP_BAR_POS[0] + Hud.HP_BAR_SIZE[0] + 10, Hud.HP_BAR_POS[1] - 2),
            Hud.TEXT_COLOR, Layers.HUD
        )

    @staticmethod
    def debug_line(player, camera) -> str:
        return f"X: {player.x:.1f} Y: {player.y:.1f} Zoom: {camera.zoom:.2f}"

    def _draw_debug_line(self, draw_manager, player, camera):
        draw_manager.queue_text(self.debug_line(player, camera), (10, 4), Hud.TEXT_COLOR, Layers.HUD)

    def _draw_health_bar(self, draw_manager, player):
        x, y = Hud.HP_BAR_POS
        w, h = Hud.HP_BAR_SIZE
        ratio = player.health / player.max_health if player.max_health > 0 else 0
        ratio = max(0.0, min(1.0, ratio))

        draw_manager.queue_shape("rect", (x, y, w, h), Hud.HP_BACK_COLOR, Layers.HUD)
        fill_width = int(w * ratio)
        if fill_width > 0:
            draw_manager.queue_shape("rect", (x, y, fill_width, h), Hud.HP_FILL_COLOR, Layers.HUD)

"""
floating_text.py
----------------
Short-lived damage numbers that drift upward and fade out.
"""

from diablolike.core.runtime.game_settings import Combat, Layers


class FloatingText:
    """Rises `rise_speed` units per tick and fades linearly to zero alpha."""

    __slots__ = ("x", "y", "text", "color", "lifetime", "max_lifetime", "rise_speed")

    def __init__(self, x, y, text, color=Combat.ENEMY_TEXT_COLOR,
                 max_lifetime=Combat.TEXT_LIFETIME, rise_speed=Combat.TEXT_RISE):
        self.x = x
        self.y = y
        self.text = text
        self.color = color
        self.lifetime = 0
        self.max_lifetime = max_lifetime
        self.rise_speed = rise_speed

    def update(self):
        self.y -= self.rise_speed
        self.lifetime += 1

    @property
    def alpha(self) -> float:
        return 1.0 - self.lifetime / self.max_lifetime

    @property
    def expired(self) -> bool:
        return self.lifetime >= self.max_lifetime

    def draw(self, draw_manager, camera):
        sx, sy = camera.world_to_screen(self.x, self.y)
        draw_manager.queue_text(self.text, (sx, sy), self.color, Layers.FLOATING_TEXT, alpha=self.alpha)

    def __repr__(self):
        return f"<FloatingText {self.text!r} at ({self.x:.1f}, {self.y:.1f}) {self.lifetime}/{self.max_lifetime}>"

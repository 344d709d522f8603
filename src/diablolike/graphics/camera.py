"""
camera.py
---------
World-to-screen mapping via offset + zoom.
"""

from diablolike.core.runtime.game_settings import CameraSettings


class Camera:
    """Offset/zoom camera recentred on the player every tick."""

    __slots__ = ('x', 'y', 'zoom', 'width', 'height')

    def __init__(self, width: int, height: int, zoom: float = CameraSettings.START_ZOOM):
        self.x = 0.0
        self.y = 0.0
        self.zoom = max(CameraSettings.MIN_ZOOM, zoom)
        self.width = width
        self.height = height

    def center_on(self, x: float, y: float):
        """Place (x, y) at the middle of the viewport at the current zoom."""
        self.x = x - self.width / (2 * self.zoom)
        self.y = y - self.height / (2 * self.zoom)

    def zoom_by(self, delta: float):
        self.zoom = max(CameraSettings.MIN_ZOOM, self.zoom + delta)

    def world_to_screen(self, x: float, y: float):
        return (x - self.x) * self.zoom, (y - self.y) * self.zoom

    def __repr__(self):
        return f"<Camera pos=({self.x:.1f}, {self.y:.1f}) zoom={self.zoom:.2f}>"

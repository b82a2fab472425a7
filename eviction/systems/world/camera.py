"""
camera.py
---------
Horizontal scrolling camera.

The camera offset is the total world distance travelled. It only grows,
and only while the run is active.
"""

from eviction.core.debug.debug_logger import DebugLogger


class Camera:
    """Single-axis world-to-screen transform."""

    __slots__ = ("offset", "active")

    def __init__(self, offset: float = 0.0):
        self.offset = offset
        self.active = True

    def advance(self, tick_distance: float):
        """Scroll forward by tick_distance. No-op once frozen."""
        if not self.active:
            return
        self.offset += tick_distance

    def to_screen_x(self, world_x: float) -> float:
        """Every entity derives its screen position through here."""
        return world_x - self.offset

    def freeze(self):
        """Stop scrolling for good (game over)."""
        if self.active:
            self.active = False
            DebugLogger.state(f"Camera frozen at {self.offset:.0f}", category="simulation")
    def reset(self):
        """Back to the start of the street, scrolling again (restart)."""
        self.offset = 0.0
        self.active = True

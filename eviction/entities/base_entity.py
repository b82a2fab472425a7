"""
base_entity.py
--------------
Foundational class for the scrolling entities (Tenant, Envelope, Letter).

Coordinate System
-----------------
Entities mix two spaces:
- self.x is a world-space coordinate (fixed to the street, not the viewport)
- self.y is a screen-space coordinate (the world never scrolls vertically)
- (x, y) is the top-left corner; width/height extend right and down

Screen x is always derived through the camera: camera.to_screen_x(x).
"""


class BaseEntity:
    """
    Axis-aligned box living in world space.

    Subclassed by Tenant, Envelope and Letter.
    """

    category = None

    __slots__ = ('x', 'y', 'width', 'height')

    def __init__(self, x: float, y: float, width: float, height: float):
        """
        Args:
            x: World-space left edge
            y: Screen-space top edge
            width: Box width in pixels
            height: Box height in pixels
        """
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    # ===================================================================
    # Coordinates
    # ===================================================================

    def screen_x(self, camera) -> float:
        """Left edge in screen space."""
        return camera.to_screen_x(self.x)

    def screen_rect(self, camera) -> tuple:
        """(x, y, w, h) in screen space, ready for overlap tests."""
        return (self.screen_x(camera), self.y, self.width, self.height)

    # ===================================================================
    # Bounds & Visibility
    # ===================================================================

    def is_past_trailing_edge(self, camera) -> bool:
        """True once the whole box has scrolled off the left of the viewport."""
        return self.screen_x(camera) + self.width < 0

    def is_past_leading_edge(self, camera, viewport_width: float, margin: float = 0) -> bool:
        """True once the left edge is beyond the right of the viewport plus margin."""
        return self.screen_x(camera) > viewport_width + margin

    # ===================================================================
    # Utilities
    # ===================================================================

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} "
            f"pos=({self.x:.1f}, {self.y:.1f}) "
            f"size=({self.width}x{self.height}) "
            f"category={self.category}>"
        )

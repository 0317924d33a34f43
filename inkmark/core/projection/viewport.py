from dataclasses import dataclass

from inkmark.core.geometry import Point


@dataclass(frozen=True)
class ViewportGeometry:
    """On-screen box of the overlay surface, as reported by the renderer."""
    width: float = 0.0
    height: float = 0.0
    top: float = 0.0
    left: float = 0.0

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def to_local(self, client_x: float, client_y: float) -> Point:
        """Convert a window-space pointer position to overlay-local space."""
        return Point(client_x - self.left, client_y - self.top)

    def contains(self, point: Point) -> bool:
        return 0 <= point.x <= self.width and 0 <= point.y <= self.height

"""
Render Surface - Drawing primitives used by the dial renderers
"""
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple

from ..core.geometry import quadratic_curve_points
from ..core.models import Point
from .theme import Color


class RenderSurface(ABC):
    """
    Drawing target for one dial frame.

    Renderers work in the dial-local frame; set_origin() places that frame's
    origin in device pixels. Renderers only issue draw calls and never read
    anything back from the surface.
    """

    def __init__(self, width: int, height: int):
        self._width = width
        self._height = height
        self._origin = Point(0.0, 0.0)

    @property
    def size(self) -> Tuple[int, int]:
        """Surface size in device pixels"""
        return (self._width, self._height)

    def set_origin(self, x: float, y: float) -> None:
        """Translate subsequent drawing so dial-local (0, 0) lands on (x, y)."""
        self._origin = Point(x, y)

    def to_device(self, p: Point) -> Tuple[float, float]:
        return (p.x + self._origin.x, p.y + self._origin.y)

    def curved_polygon(self, corners: Sequence[Point], control: Point, end: Point,
                       fill: Optional[Color] = None, outline: Optional[Color] = None,
                       width: float = 1) -> None:
        """
        Closed shape: straight edges through `corners`, then a quadratic curve
        from the last corner via `control` to `end`, then back to the start.
        """
        curve = quadratic_curve_points(corners[-1], control, end)
        self.polygon(list(corners[:-1]) + curve, fill=fill, outline=outline, width=width)

    @abstractmethod
    def clear(self) -> None:
        """Remove everything drawn in the previous frame"""

    @abstractmethod
    def circle(self, center: Point, radius: float, fill: Optional[Color] = None,
               outline: Optional[Color] = None, width: float = 1) -> None:
        pass

    @abstractmethod
    def line(self, start: Point, end: Point, color: Color, width: float = 1) -> None:
        pass

    @abstractmethod
    def rectangle(self, top_left: Point, width: float, height: float, fill: Color) -> None:
        pass

    @abstractmethod
    def polygon(self, points: Sequence[Point], fill: Optional[Color] = None,
                outline: Optional[Color] = None, width: float = 1) -> None:
        pass

    @abstractmethod
    def text(self, position: Point, text: str, size: int, color: Color,
             rotation_degrees: float = 0) -> None:
        """
        Draw text centered on `position`.

        Args:
            rotation_degrees: Clockwise rotation of the glyphs on screen
        """

    def present(self) -> None:
        """Flush the frame to the output; no-op for retained surfaces"""

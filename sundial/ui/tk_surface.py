"""
Tk Canvas Surface - Draws dial frames onto a tkinter canvas
"""
import tkinter as tk
from typing import List, Optional, Sequence

from ..core.models import Point
from .surface import RenderSurface
from .theme import Color, Theme


class TkCanvasSurface(RenderSurface):
    """
    RenderSurface backed by a tk.Canvas.

    Tk has no alpha channel, so translucent colors are blended against a
    fixed backdrop color (the dial face by default).
    """

    def __init__(self, canvas: tk.Canvas, width: int, height: int,
                 backdrop: Color = Theme.FACE_FILL):
        super().__init__(width, height)
        self._canvas = canvas
        self._backdrop = backdrop

    def resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height

    def _color(self, color: Optional[Color]) -> str:
        if color is None:
            return ''
        return Theme.to_hex(color, self._backdrop)

    def _flatten(self, points: Sequence[Point]) -> List[float]:
        coords: List[float] = []
        for p in points:
            coords.extend(self.to_device(p))
        return coords

    def clear(self) -> None:
        self._canvas.delete('all')

    def circle(self, center, radius, fill=None, outline=None, width=1) -> None:
        cx, cy = self.to_device(center)
        self._canvas.create_oval(
            cx - radius, cy - radius, cx + radius, cy + radius,
            fill=self._color(fill), outline=self._color(outline),
            width=width if outline else 0,
        )

    def line(self, start, end, color, width=1) -> None:
        self._canvas.create_line(*self._flatten([start, end]), fill=self._color(color), width=width)

    def rectangle(self, top_left, width, height, fill) -> None:
        x, y = self.to_device(top_left)
        self._canvas.create_rectangle(x, y, x + width, y + height, fill=self._color(fill), width=0)

    def polygon(self, points, fill=None, outline=None, width=1) -> None:
        self._canvas.create_polygon(
            *self._flatten(points),
            fill=self._color(fill), outline=self._color(outline),
            width=width if outline else 0,
        )

    def text(self, position, text, size, color, rotation_degrees=0) -> None:
        x, y = self.to_device(position)
        # Tk measures text angles counter-clockwise
        self._canvas.create_text(
            x, y, text=text, anchor='center',
            font=(Theme.FONT_FAMILY, size), fill=self._color(color),
            angle=-rotation_degrees % 360,
        )

"""
Dial Face - Plate, hour lines, Roman numerals and compass rose
"""
from dataclasses import dataclass
from typing import List

from ..core.geometry import polar, rotate
from ..core.hour_angle import DEGREES_PER_HOUR, MERIDIAN_HOUR, hour_line_angle
from ..core.models import DIAL_RADIUS, DialConfig, Point
from ..core.roman import roman_numeral_for_hour
from ..ui.surface import RenderSurface
from ..ui.theme import Theme


START_HOUR = 2   # 2 AM
END_HOUR = 22    # 10 PM

CENTRAL_CIRCLE_RADIUS = 120
# Measured inward from the plate edge
TICK_INSET = 50
LABEL_INSET = 30

COMPASS_CENTER = Point(0.0, CENTRAL_CIRCLE_RADIUS / 2)
COMPASS_RADIUS = CENTRAL_CIRCLE_RADIUS / 2
COMPASS_STROKE_THICKNESS = 2
COMPASS_CROSS_INSET = 32
COMPASS_LABEL_INSET = 18
STAR_TICK_INTERVAL_DEGREES = 15
STAR_TICK_THICKNESS = 1


@dataclass(frozen=True)
class HourMark:
    """Placement of one hour line and its numeral."""

    hour: int
    line_angle_degrees: float
    tick_start: Point
    tick_end: Point
    label_position: Point
    label: str

    @property
    def label_rotation_degrees(self) -> float:
        """Screen direction of the hour line (0 = +x, clockwise)."""
        return self.line_angle_degrees - 90


def hour_marks(latitude_degrees: float, radius: float = DIAL_RADIUS,
               meridian_hour: float = MERIDIAN_HOUR,
               degrees_per_hour: float = DEGREES_PER_HOUR) -> List[HourMark]:
    """
    Hour line placements for every whole hour in [START_HOUR, END_HOUR].

    Args:
        latitude_degrees: Observer latitude
        radius: Plate radius; ticks and labels keep their inset from the edge

    Returns:
        One HourMark per hour, in hour order
    """
    marks = []
    for hour in range(START_HOUR, END_HOUR + 1):
        theta = hour_line_angle(hour, latitude_degrees, meridian_hour, degrees_per_hour)
        # noon points straight up
        direction = theta - 90
        marks.append(HourMark(
            hour=hour,
            line_angle_degrees=theta,
            tick_start=polar(radius - TICK_INSET, direction),
            tick_end=polar(CENTRAL_CIRCLE_RADIUS, direction),
            label_position=polar(radius - LABEL_INSET, direction),
            label=roman_numeral_for_hour(hour),
        ))
    return marks


class DialFace:
    """
    Draws the static part of the dial for one frame.
    """

    def __init__(self, radius: float = DIAL_RADIUS):
        self._radius = radius

    def draw(self, surface: RenderSurface, latitude_degrees: float, dial: DialConfig) -> List[HourMark]:
        """
        Draw plate, inner ring, optional compass rose and hour marks.

        Returns:
            The hour marks that were drawn
        """
        surface.circle(Point(0.0, 0.0), self._radius, fill=Theme.FACE_FILL,
                       outline=Theme.INK, width=Theme.FACE_OUTLINE_WIDTH)
        surface.circle(Point(0.0, 0.0), CENTRAL_CIRCLE_RADIUS, outline=Theme.RING,
                       width=Theme.RING_WIDTH)

        if dial.show_compass_rose:
            self._draw_compass_rose(surface)

        marks = hour_marks(latitude_degrees, self._radius)
        for mark in marks:
            surface.line(mark.tick_start, mark.tick_end, Theme.TICK, width=Theme.TICK_WIDTH)
            # Turn the glyphs across the hour line so they read facing the center
            surface.text(mark.label_position, mark.label, Theme.FONT_SIZE_NUMERAL, Theme.INK,
                         rotation_degrees=mark.label_rotation_degrees + 90)
        return marks

    def _draw_compass_rose(self, surface: RenderSurface) -> None:
        c = COMPASS_CENTER
        surface.circle(c, COMPASS_RADIUS, outline=Theme.COMPASS_RING, width=Theme.RING_WIDTH)

        cross_length = 2 * (COMPASS_RADIUS - COMPASS_CROSS_INSET)
        half_thick = COMPASS_STROKE_THICKNESS / 2
        surface.rectangle(Point(c.x - half_thick, c.y - cross_length / 2),
                          COMPASS_STROKE_THICKNESS, cross_length, Theme.COMPASS_STROKE)
        surface.rectangle(Point(c.x - cross_length / 2, c.y - half_thick),
                          cross_length, COMPASS_STROKE_THICKNESS, Theme.COMPASS_STROKE)

        ray_half = cross_length * 0.5 / 2
        ray_thick = STAR_TICK_THICKNESS / 2
        corners = [Point(c.x - ray_thick, c.y - ray_half), Point(c.x + ray_thick, c.y - ray_half),
                   Point(c.x + ray_thick, c.y + ray_half), Point(c.x - ray_thick, c.y + ray_half)]
        for angle in range(0, 360, STAR_TICK_INTERVAL_DEGREES):
            if angle % 90 == 0:
                continue  # cross bars cover the cardinal axes
            surface.polygon([rotate(p, angle, c) for p in corners], fill=Theme.COMPASS_RAY)

        reach = COMPASS_RADIUS - COMPASS_LABEL_INSET
        labels = (
            ('N', Point(c.x, c.y - reach + 5)),
            ('E', Point(c.x + reach - 4, c.y + 1)),
            ('S', Point(c.x, c.y + reach)),
            ('W', Point(c.x - reach + 2, c.y + 1)),
        )
        for text, position in labels:
            surface.text(position, text, Theme.FONT_SIZE_COMPASS, Theme.COMPASS_STROKE)

"""
Planar helpers for the dial-local frame
"""
import math
from typing import List

from .models import Point


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def distance(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def normalize(p: Point) -> Point:
    """Unit vector along p; the zero vector stays zero."""
    length = math.hypot(p.x, p.y)
    if length == 0:
        return Point(0.0, 0.0)
    return Point(p.x / length, p.y / length)


def rotate(p: Point, degrees: float, pivot: Point = Point(0.0, 0.0)) -> Point:
    """Rotate clockwise on screen (y grows downward)."""
    rad = math.radians(degrees)
    c, s = math.cos(rad), math.sin(rad)
    dx, dy = p.x - pivot.x, p.y - pivot.y
    return Point(pivot.x + dx * c - dy * s, pivot.y + dx * s + dy * c)


def polar(radius: float, degrees: float, center: Point = Point(0.0, 0.0)) -> Point:
    """Point at a screen angle (0 = +x, clockwise positive)."""
    rad = math.radians(degrees)
    return Point(center.x + radius * math.cos(rad), center.y + radius * math.sin(rad))


def quadratic_curve_points(start: Point, control: Point, end: Point, segments: int = 16) -> List[Point]:
    """
    Sample a quadratic Bezier curve.

    Returns:
        segments + 1 points from start to end inclusive
    """
    points = []
    for i in range(segments + 1):
        t = i / segments
        u = 1 - t
        points.append(Point(
            u * u * start.x + 2 * u * t * control.x + t * t * end.x,
            u * u * start.y + 2 * u * t * control.y + t * t * end.y,
        ))
    return points


def bow_control_point(start: Point, end: Point, strength: float, toward: Point = Point(0.0, 0.0)) -> Point:
    """
    Control point bowing the edge start->end toward a target point.

    Args:
        start: Edge start
        end: Edge end
        strength: Offset of the control point from the edge midpoint
        toward: Point the curve bends toward (the dial center)
    """
    mid = midpoint(start, end)
    return mid + normalize(toward - mid).scale(strength)

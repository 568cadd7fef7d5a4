"""
Angle Math - Degree/radian conversion primitives
"""
import math


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * math.pi / 180


def radians_to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * 180 / math.pi

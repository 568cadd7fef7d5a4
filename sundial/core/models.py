"""
Models - Value types passed between settings, engine and renderers
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional


DIAL_WIDTH = 600
DIAL_RADIUS = DIAL_WIDTH / 2 - 20

GNOMON_LENGTH_SCALE_MIN = 0.3
GNOMON_LENGTH_SCALE_MAX = 0.9
GNOMON_LENGTH_SCALE_DEFAULT = 0.8

# San Diego
DEFAULT_LATITUDE_DEGREES = 32.74554724936368
DEFAULT_LONGITUDE_DEGREES = -117.14900988976665


@dataclass(frozen=True)
class Point:
    """Coordinates in the dial-local frame (origin at the dial center, y down)."""

    x: float
    y: float

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> 'Point':
        return Point(self.x * factor, self.y * factor)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class GeoLocation:
    """Observer position. Longitude is carried but the projection ignores it."""

    latitude_degrees: float
    longitude_degrees: float

    def is_valid(self) -> bool:
        """True when both coordinates are finite and inside their ranges."""
        return (
            math.isfinite(self.latitude_degrees)
            and math.isfinite(self.longitude_degrees)
            and -90 <= self.latitude_degrees <= 90
            and -180 <= self.longitude_degrees <= 180
        )


DEFAULT_LOCATION = GeoLocation(DEFAULT_LATITUDE_DEGREES, DEFAULT_LONGITUDE_DEGREES)


@dataclass(frozen=True)
class ClockTime:
    """Wall-clock hours and minutes, used for time overrides."""

    hours: int
    minutes: int

    def is_valid(self) -> bool:
        return 0 <= self.hours <= 23 and 0 <= self.minutes <= 59


class GnomonStyle(Enum):
    LINE = 'line'
    WEDGE = 'wedge'
    RIGHT_TRIANGLE = 'right_triangle'
    CURVED_WALL = 'curved_wall'

    @classmethod
    def parse(cls, value: str) -> Optional['GnomonStyle']:
        """
        Look up a style by value or member name, ignoring case and separators.

        Args:
            value: e.g. 'curved_wall', 'CurvedWall', 'RIGHT-TRIANGLE'

        Returns:
            Matching style, or None when nothing matches
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower().replace('-', '').replace('_', '').replace(' ', '')
        for style in cls:
            if style.value.replace('_', '') == key:
                return style
        return None


DEFAULT_GNOMON_STYLE = GnomonStyle.CURVED_WALL


def clamp_length_scale(scale: float) -> float:
    """
    Clamp a gnomon length scale into its allowed range.

    Non-numeric and non-finite values fall back to the default scale.
    """
    try:
        scale = float(scale)
    except (TypeError, ValueError):
        return GNOMON_LENGTH_SCALE_DEFAULT
    if not math.isfinite(scale):
        return GNOMON_LENGTH_SCALE_DEFAULT
    return min(GNOMON_LENGTH_SCALE_MAX, max(GNOMON_LENGTH_SCALE_MIN, scale))


@dataclass(frozen=True)
class DialConfig:
    """Immutable per-tick view of the user's dial preferences."""

    gnomon_style: GnomonStyle = DEFAULT_GNOMON_STYLE
    gnomon_length_scale: float = GNOMON_LENGTH_SCALE_DEFAULT
    show_compass_rose: bool = False

    def __post_init__(self):
        # frozen, so bypass __setattr__ to store the clamped value
        object.__setattr__(self, 'gnomon_length_scale', clamp_length_scale(self.gnomon_length_scale))

    @property
    def gnomon_length(self) -> float:
        """Physical gnomon length in dial units."""
        return DIAL_RADIUS * self.gnomon_length_scale


@dataclass(frozen=True)
class ShadowProjection:
    """Shadow geometry for a single instant. Recomputed every tick."""

    hour_angle_degrees: float
    line_angle_degrees: float
    sun_elevation_radians: float
    shadow_length: float
    shadow_tip: Point

"""
Shadow Projection Model - Sun elevation and gnomon shadow geometry
"""
import logging
import math
from typing import Optional

from .angles import degrees_to_radians
from .hour_angle import DEGREES_PER_HOUR, MERIDIAN_HOUR, hour_angle, hour_line_angle
from .models import Point, ShadowProjection


logger = logging.getLogger(__name__)

# Below this the sun is treated as on or under the horizon
GRAZING_TAN_THRESHOLD = 1e-6


def sun_elevation(hour: float, latitude_degrees: float,
                  meridian_hour: float = MERIDIAN_HOUR,
                  degrees_per_hour: float = DEGREES_PER_HOUR) -> float:
    """Sun elevation above the horizon in radians (equinox model, no declination)."""
    hour_angle_rad = degrees_to_radians(hour_angle(hour, meridian_hour, degrees_per_hour))
    return math.asin(math.cos(degrees_to_radians(latitude_degrees)) * math.cos(hour_angle_rad))


def gnomon_base_point(gnomon_length: float, latitude_degrees: float) -> Point:
    """Foot of the gnomon tip projected onto the dial's up axis."""
    return Point(0.0, -gnomon_length * math.cos(degrees_to_radians(latitude_degrees)))


def project(
    hour: float,
    latitude_degrees: float,
    gnomon_length: float,
    meridian_hour: float = MERIDIAN_HOUR,
    degrees_per_hour: float = DEGREES_PER_HOUR
) -> Optional[ShadowProjection]:
    """
    Project the gnomon tip onto the dial for the given hour.

    Args:
        hour: Clock hour, fractional
        latitude_degrees: Observer latitude
        gnomon_length: Gnomon length in dial units
        meridian_hour: Hour of local noon
        degrees_per_hour: Angular rate of the sun

    Returns:
        ShadowProjection, or None when the sun grazes or sits below the
        horizon and no shadow can be drawn
    """
    theta_deg = hour_line_angle(hour, latitude_degrees, meridian_hour, degrees_per_hour)
    theta = degrees_to_radians(theta_deg)

    alpha = sun_elevation(hour, latitude_degrees, meridian_hour, degrees_per_hour)
    tan_alpha = math.tan(alpha)
    if not math.isfinite(tan_alpha) or abs(tan_alpha) < GRAZING_TAN_THRESHOLD:
        logger.debug(f"No shadow at hour={hour:.3f} lat={latitude_degrees:.3f}: sun at horizon")
        return None

    # Positive length so the shadow direction follows theta alone
    shadow_length = gnomon_length / abs(tan_alpha)

    return ShadowProjection(
        hour_angle_degrees=hour_angle(hour, meridian_hour, degrees_per_hour),
        line_angle_degrees=theta_deg,
        sun_elevation_radians=alpha,
        shadow_length=shadow_length,
        shadow_tip=Point(shadow_length * math.sin(theta), -shadow_length * math.cos(theta)),
    )

"""
Hour Angle Model - Maps a clock hour to the angle of its line on a horizontal dial
"""
import math

from .angles import degrees_to_radians, radians_to_degrees


MERIDIAN_HOUR = 12
DEGREES_PER_HOUR = 360 / 24


def hour_angle(hour: float, meridian_hour: float = MERIDIAN_HOUR,
               degrees_per_hour: float = DEGREES_PER_HOUR) -> float:
    """Signed hour angle from local noon, in degrees."""
    return (hour - meridian_hour) * degrees_per_hour


def hour_line_angle(
    hour: float,
    latitude_degrees: float,
    meridian_hour: float = MERIDIAN_HOUR,
    degrees_per_hour: float = DEGREES_PER_HOUR
) -> float:
    """
    Angle of an hour line on the dial face, measured from the noon line.

    atan() only covers (-90, 90), so hours outside 06:00-18:00 would land on
    top of their mirror hours. Those are moved to the opposite side of the
    dial by adding 180 degrees.

    Args:
        hour: Clock hour, fractional (e.g. 14.5 for 14:30)
        latitude_degrees: Observer latitude
        meridian_hour: Hour of local noon
        degrees_per_hour: Angular rate of the sun

    Returns:
        Dial angle in degrees. Degenerate inputs yield nan/inf, never raise.
    """
    ha = hour_angle(hour, meridian_hour, degrees_per_hour)
    rhs = math.tan(degrees_to_radians(ha)) * math.sin(degrees_to_radians(latitude_degrees))

    theta = radians_to_degrees(math.atan(rhs))
    if abs(ha) > 90:
        theta += 180

    return theta

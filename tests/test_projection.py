"""Tests for sun elevation and shadow projection."""

from __future__ import annotations

import math

import pytest

from sundial.core.hour_angle import hour_line_angle
from sundial.core.projection import gnomon_base_point, project, sun_elevation


def test_golden_noon_case() -> None:
    """San Diego at noon with a 200-unit gnomon: shadow straight up the noon line."""
    latitude = 32.7455
    projection = project(12.0, latitude, 200)

    assert projection is not None
    assert projection.line_angle_degrees == pytest.approx(0)
    assert projection.hour_angle_degrees == 0
    assert projection.sun_elevation_radians == pytest.approx(math.radians(90 - latitude))
    assert projection.shadow_length == pytest.approx(200 * math.tan(math.radians(latitude)))
    assert projection.shadow_length == pytest.approx(128.6, abs=0.1)
    assert projection.shadow_tip.x == pytest.approx(0, abs=1e-9)
    assert projection.shadow_tip.y == pytest.approx(-projection.shadow_length)


@pytest.mark.parametrize('hour', [6.0, 18.0])
@pytest.mark.parametrize('latitude', [-45, 0, 32.7455, 60])
def test_no_shadow_with_sun_on_horizon(hour: float, latitude: float) -> None:
    """At 06:00 and 18:00 the sun grazes the horizon and the shadow is omitted."""
    assert project(hour, latitude, 200) is None


@pytest.mark.parametrize('latitude', [90, -90])
def test_no_shadow_at_the_poles(latitude: float) -> None:
    """At the poles the modelled sun never rises above the horizon."""
    assert project(12, latitude, 200) is None


def test_equator_noon_shadow_vanishes() -> None:
    """Sun at the zenith gives a present but zero-length shadow."""
    projection = project(12, 0, 200)
    assert projection is not None
    assert projection.shadow_length == pytest.approx(0, abs=1e-9)


def test_omission_threshold() -> None:
    """The shadow disappears exactly when |tan(alpha)| drops below 1e-6."""
    radians_per_hour = math.pi / 12
    assert project(6 + 2e-6 / radians_per_hour, 0, 200) is not None
    assert project(6 + 0.5e-6 / radians_per_hour, 0, 200) is None


def test_night_hours_keep_positive_length() -> None:
    """Below-horizon hours still yield a positive length along the flipped line."""
    latitude = 32.7455
    projection = project(2, latitude, 200)
    assert projection is not None

    alpha = sun_elevation(2, latitude)
    assert alpha < 0
    assert projection.shadow_length == pytest.approx(200 / abs(math.tan(alpha)))
    assert projection.line_angle_degrees == pytest.approx(hour_line_angle(2, latitude))
    assert projection.shadow_tip.y > 0


def test_afternoon_shadow_points_right() -> None:
    """In the northern hemisphere afternoon shadows fall to the east (right)."""
    projection = project(15, 40, 200)
    assert projection is not None
    assert projection.shadow_tip.x > 0
    assert projection.shadow_tip.y < 0
    assert math.hypot(projection.shadow_tip.x, projection.shadow_tip.y) == pytest.approx(
        projection.shadow_length
    )


def test_gnomon_base_point() -> None:
    """Base point sits on the up axis at length * cos(latitude)."""
    base = gnomon_base_point(200, 60)
    assert base.x == 0
    assert base.y == pytest.approx(-100)

"""Tests for the clock service and time overrides."""

from __future__ import annotations

from datetime import datetime

import pytest

from sundial.core.clock_service import ClockService, parse_time_override
from sundial.core.models import ClockTime


@pytest.mark.parametrize(
    ('text', 'expected'),
    [
        ('07:30', ClockTime(7, 30)),
        ('7:05', ClockTime(7, 5)),
        (' 23:59 ', ClockTime(23, 59)),
        ('24:00', None),
        ('12:60', None),
        ('12:5', None),
        ('noon', None),
        ('', None),
        (None, None),
        (930, None),
        (9.5, None),
    ],
)
def test_parse_time_override(text, expected) -> None:
    """Only well-formed, in-range HH:MM strings produce an override."""
    assert parse_time_override(text) == expected


def test_current_time_and_second(fixed_now) -> None:
    """The clock reads through the injected now function."""
    clock = ClockService(now_func=fixed_now)
    assert clock.get_current_time() == fixed_now.when
    assert clock.get_current_second() == int(fixed_now.when.timestamp())
    assert clock.timezone is None


def test_resolve_without_override_is_real_time(clock, fixed_now) -> None:
    assert clock.resolve(None) == fixed_now.when


def test_resolve_with_override_keeps_date(clock) -> None:
    """An override replaces hours and minutes and zeroes the seconds."""
    when = clock.resolve(ClockTime(9, 5))
    assert when == datetime(2024, 3, 20, 9, 5, 0)
    assert ClockService.format_time(when) == '09:05:00'
    assert ClockService.dial_hour(when) == pytest.approx(9 + 5 / 60)


def test_invalid_override_is_ignored(clock, fixed_now) -> None:
    assert clock.resolve(ClockTime(25, 0)) == fixed_now.when


def test_format_time_is_fixed_width() -> None:
    assert ClockService.format_time(datetime(2024, 1, 1, 3, 4, 5)) == '03:04:05'


def test_dial_hour_ignores_seconds(fixed_now) -> None:
    assert ClockService.dial_hour(fixed_now.when) == pytest.approx(14 + 35 / 60)


def test_unknown_timezone_falls_back_to_local(fixed_now) -> None:
    """A bad timezone name is logged and replaced with local time."""
    received = []

    def now(tz=None):
        received.append(tz)
        return fixed_now.when

    clock = ClockService('Not/AZone', now_func=now)
    clock.get_current_time()
    assert clock.timezone is None
    assert received == [None]

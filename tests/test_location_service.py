"""Tests for location resolution and lookup."""

from __future__ import annotations

import math

import pytest
import requests

from sundial.core import location_service as location_module
from sundial.core.config_service import ConfigService
from sundial.core.location_service import LocationService
from sundial.core.models import DEFAULT_LOCATION, GeoLocation


class FakeResponse:
    def __init__(self, payload, status_error: Exception | None = None) -> None:
        self._payload = payload
        self._status_error = status_error

    def raise_for_status(self) -> None:
        if self._status_error:
            raise self._status_error

    def json(self):
        return self._payload


def _patch_get(monkeypatch, response=None, error: Exception | None = None) -> list:
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        if error:
            raise error
        return response

    monkeypatch.setattr(location_module.requests, 'get', fake_get)
    return calls


def test_default_location(location: LocationService) -> None:
    assert location.current == DEFAULT_LOCATION
    assert location.resolve() == DEFAULT_LOCATION


def test_resolve_prefers_valid_override(location: LocationService) -> None:
    override = GeoLocation(-33.86, 151.2)
    assert location.resolve(override) == override
    assert location.resolve(GeoLocation(math.nan, 0)) == DEFAULT_LOCATION


def test_from_config() -> None:
    config = ConfigService(config_paths=[], environ={'SUNDIAL_LATITUDE': '42.27', 'SUNDIAL_LONGITUDE': '-71.8'})
    service = LocationService.from_config(config)
    assert service.current == GeoLocation(42.27, -71.8)


def test_invalid_default_is_replaced() -> None:
    assert LocationService(default=GeoLocation(200, 0)).current == DEFAULT_LOCATION


def test_locate_updates_location(monkeypatch, location: LocationService) -> None:
    calls = _patch_get(monkeypatch, FakeResponse({'latitude': 42.27, 'longitude': -71.8}))
    assert location.locate() == GeoLocation(42.27, -71.8)
    assert location.current == GeoLocation(42.27, -71.8)
    assert location.last_error is None
    assert calls == [('https://ipapi.co/json/', 10)]


def test_locate_accepts_short_keys(monkeypatch, location: LocationService) -> None:
    _patch_get(monkeypatch, FakeResponse({'lat': '10.5', 'lon': '20.25'}))
    assert location.locate() == GeoLocation(10.5, 20.25)


@pytest.mark.parametrize(
    'kwargs',
    [
        {'error': requests.exceptions.ConnectionError('offline')},
        {'response': FakeResponse({}, status_error=requests.exceptions.HTTPError('503'))},
        {'response': FakeResponse({'city': 'nowhere'})},
        {'response': FakeResponse({'latitude': 123, 'longitude': 0})},
        {'response': FakeResponse(['not', 'a', 'dict'])},
    ],
)
def test_failed_lookup_keeps_previous_location(monkeypatch, location: LocationService, kwargs) -> None:
    """Any lookup failure leaves the current location untouched."""
    _patch_get(monkeypatch, **kwargs)
    assert location.locate() == DEFAULT_LOCATION
    assert location.current == DEFAULT_LOCATION
    assert location.last_error

"""
Location Service - Default, looked-up and overridden observer positions
"""
import logging
from typing import Any, Dict, Optional

import requests

from .models import DEFAULT_LOCATION, GeoLocation


logger = logging.getLogger(__name__)

DEFAULT_LOOKUP_URL = 'https://ipapi.co/json/'


class LocationService:
    """
    Source of the observer location.

    Starts at a fixed default and can be refreshed from an IP geolocation
    endpoint. A failed lookup keeps the previous location.
    """

    def __init__(self, default: GeoLocation = DEFAULT_LOCATION,
                 lookup_url: str = DEFAULT_LOOKUP_URL, timeout: float = 10):
        """
        Args:
            default: Location used until a lookup succeeds
            lookup_url: JSON endpoint returning 'latitude'/'longitude'
            timeout: Request timeout in seconds
        """
        if not default.is_valid():
            logger.warning(f"Invalid default location {default}, using {DEFAULT_LOCATION}")
            default = DEFAULT_LOCATION
        self._location = default
        self._lookup_url = lookup_url
        self._timeout = timeout
        self._last_error: Optional[str] = None

    @classmethod
    def from_config(cls, config) -> 'LocationService':
        """Build from the 'location' section of a ConfigService."""
        try:
            default = GeoLocation(
                float(config.get('location.latitude', DEFAULT_LOCATION.latitude_degrees)),
                float(config.get('location.longitude', DEFAULT_LOCATION.longitude_degrees)),
            )
        except (TypeError, ValueError):
            default = DEFAULT_LOCATION
        return cls(
            default=default,
            lookup_url=config.get('location.lookup_url', DEFAULT_LOOKUP_URL),
            timeout=config.get('location.lookup_timeout', 10),
        )

    @property
    def current(self) -> GeoLocation:
        return self._location

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    def resolve(self, override: Optional[GeoLocation] = None) -> GeoLocation:
        """
        Effective location for a tick.

        Args:
            override: Custom location from settings, used when valid

        Returns:
            The override if valid, otherwise the current location
        """
        if override is not None and override.is_valid():
            return override
        return self._location

    def locate(self) -> GeoLocation:
        """
        Refresh the location from the lookup endpoint.

        Returns:
            The current location, updated on success
        """
        try:
            located = self._fetch_location()
        except requests.exceptions.RequestException as e:
            self._last_error = str(e)
            logger.error(f"Location lookup failed: {e}")
            return self._location

        if located is None:
            return self._location

        self._location = located
        self._last_error = None
        logger.info(f"Location updated: lat={located.latitude_degrees:.4f} lon={located.longitude_degrees:.4f}")
        return self._location

    def _fetch_location(self) -> Optional[GeoLocation]:
        response = requests.get(self._lookup_url, timeout=self._timeout)
        response.raise_for_status()
        return self._parse_location(response.json())

    def _parse_location(self, data: Dict[str, Any]) -> Optional[GeoLocation]:
        """Accepts 'latitude'/'longitude' or 'lat'/'lon' keys."""
        try:
            latitude = float(data.get('latitude', data.get('lat')))
            longitude = float(data.get('longitude', data.get('lon')))
        except (AttributeError, TypeError, ValueError) as e:
            self._last_error = f"unparsable response: {e}"
            logger.error(f"Location lookup returned no usable coordinates: {e}")
            return None

        location = GeoLocation(latitude, longitude)
        if not location.is_valid():
            self._last_error = f"out of range: {latitude}, {longitude}"
            logger.error(f"Location lookup returned out-of-range coordinates: {latitude}, {longitude}")
            return None
        return location

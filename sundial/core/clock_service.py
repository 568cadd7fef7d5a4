"""
Clock Service - Current instant, time overrides and display formatting
"""
import logging
import re
from datetime import datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .models import ClockTime


logger = logging.getLogger(__name__)

_OVERRIDE_PATTERN = re.compile(r'^\s*(\d{1,2}):(\d{2})\s*$')


def parse_time_override(value: Optional[str]) -> Optional[ClockTime]:
    """
    Parse an 'HH:MM' override string.

    Args:
        value: Text from the settings panel, may be None or empty

    Returns:
        ClockTime, or None when the text is missing or malformed
    """
    if not value:
        return None
    if not isinstance(value, str):
        logger.debug(f"Ignoring non-text time override: {value!r}")
        return None
    match = _OVERRIDE_PATTERN.match(value)
    if not match:
        logger.debug(f"Ignoring malformed time override: {value!r}")
        return None
    override = ClockTime(int(match.group(1)), int(match.group(2)))
    if not override.is_valid():
        logger.debug(f"Ignoring out-of-range time override: {value!r}")
        return None
    return override


class ClockService:
    """
    Time source for the dial, with timezone support and an injectable clock.
    """

    def __init__(self, timezone: Optional[str] = None,
                 now_func: Optional[Callable[[Optional[ZoneInfo]], datetime]] = None):
        """
        Initialize clock service.

        Args:
            timezone: IANA timezone string; None uses the system local time
            now_func: Replacement for datetime.now, mainly for tests
        """
        self._timezone = timezone
        self._tz_obj: Optional[ZoneInfo] = None
        self._now_func = now_func or datetime.now
        self._load_timezone()

    def _load_timezone(self) -> None:
        """Load timezone object, fall back to local time on error"""
        if not self._timezone:
            self._tz_obj = None
            return
        try:
            self._tz_obj = ZoneInfo(self._timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            logger.warning(f"Invalid timezone '{self._timezone}', using local time: {e}")
            self._timezone = None
            self._tz_obj = None

    def get_current_time(self) -> datetime:
        """Current instant in the configured timezone."""
        return self._now_func(self._tz_obj)

    def get_current_second(self) -> int:
        """Current time in whole seconds since the Unix epoch."""
        return int(self.get_current_time().timestamp())

    def resolve(self, override: Optional[ClockTime] = None) -> datetime:
        """
        Effective display instant.

        Args:
            override: Optional hours/minutes replacing the real time of day

        Returns:
            The real instant, or today's date at the override time with
            seconds zeroed
        """
        now = self.get_current_time()
        if override is None or not override.is_valid():
            return now
        return now.replace(hour=override.hours, minute=override.minutes, second=0, microsecond=0)

    @staticmethod
    def format_time(when: datetime) -> str:
        """Fixed-width HH:MM:SS."""
        return when.strftime('%H:%M:%S')

    @staticmethod
    def dial_hour(when: datetime) -> float:
        """Fractional hour fed to the dial (seconds are ignored)."""
        return when.hour + when.minute / 60

    @property
    def timezone(self) -> Optional[str]:
        """Configured timezone string, None for local time"""
        return self._timezone

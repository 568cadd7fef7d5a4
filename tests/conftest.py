"""Shared fixtures for sundial tests."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional

import pytest

from sundial.core.clock_service import ClockService
from sundial.core.location_service import LocationService
from sundial.core.settings_service import SettingsService
from sundial.ui.surface import RenderSurface


class RecordingSurface(RenderSurface):
    """Surface that records draw calls instead of drawing."""

    def __init__(self, width: int = 900, height: int = 760) -> None:
        super().__init__(width, height)
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.on_clear: Optional[Callable[[], None]] = None

    def _record(self, kind: str, **kwargs: Any) -> None:
        self.calls.append((kind, kwargs))

    def of(self, kind: str) -> list[dict[str, Any]]:
        return [args for name, args in self.calls if name == kind]

    def kinds(self) -> list[str]:
        return [name for name, _ in self.calls]

    def set_origin(self, x: float, y: float) -> None:
        super().set_origin(x, y)
        self._record('origin', x=x, y=y)

    def clear(self) -> None:
        self._record('clear')
        if self.on_clear:
            self.on_clear()

    def circle(self, center, radius, fill=None, outline=None, width=1) -> None:
        self._record('circle', center=center, radius=radius, fill=fill, outline=outline, width=width)

    def line(self, start, end, color, width=1) -> None:
        self._record('line', start=start, end=end, color=color, width=width)

    def rectangle(self, top_left, width, height, fill) -> None:
        self._record('rectangle', top_left=top_left, width=width, height=height, fill=fill)

    def polygon(self, points, fill=None, outline=None, width=1) -> None:
        self._record('polygon', points=list(points), fill=fill, outline=outline, width=width)

    def curved_polygon(self, corners, control, end, fill=None, outline=None, width=1) -> None:
        self._record('curved_polygon', corners=list(corners), control=control, end=end, fill=fill)

    def text(self, position, text, size, color, rotation_degrees=0) -> None:
        self._record('text', position=position, text=text, size=size, color=color,
                     rotation_degrees=rotation_degrees)

    def present(self) -> None:
        self._record('present')


class FixedNow:
    """Settable stand-in for datetime.now."""

    def __init__(self, when: datetime) -> None:
        self.when = when

    def __call__(self, tz=None) -> datetime:
        return self.when.replace(tzinfo=tz) if tz is not None else self.when


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def fixed_now() -> FixedNow:
    return FixedNow(datetime(2024, 3, 20, 14, 35, 27))


@pytest.fixture
def clock(fixed_now: FixedNow) -> ClockService:
    return ClockService(now_func=fixed_now)


@pytest.fixture
def settings() -> SettingsService:
    return SettingsService()


@pytest.fixture
def location() -> LocationService:
    return LocationService()


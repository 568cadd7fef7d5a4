"""
Update Cycle - Once-per-second recompute and redraw of the dial
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .core.clock_service import ClockService
from .core.location_service import LocationService
from .core.models import DialConfig, GeoLocation, Point, ShadowProjection
from .core.settings_service import SettingsService
from .core.watchdog import RenderWatchdog
from .render.dial_face import DialFace, HourMark
from .render.gnomons import render_gnomon
from .ui.layout import Layout
from .ui.surface import RenderSurface
from .ui.theme import Theme


logger = logging.getLogger(__name__)


class RenderSurfaceMissingError(RuntimeError):
    """Raised at construction when there is nothing to draw on."""


class CycleState(Enum):
    IDLE = 'idle'
    RENDERING = 'rendering'


@dataclass(frozen=True)
class Frame:
    """What one render produced; handy for logging and tests."""

    time_string: str
    hour: float
    location: GeoLocation
    dial: DialConfig
    hour_marks: List[HourMark]
    projection: Optional[ShadowProjection]

    @property
    def has_shadow(self) -> bool:
        return self.projection is not None


class UpdateCycle:
    """
    Owns the render surface and redraws it when the wall-clock second changes.

    tick() may be called at any rate; it renders at most once per distinct
    second. Rendering is synchronous and refuses to re-enter itself.
    """

    def __init__(
        self,
        surface: Optional[RenderSurface],
        clock: ClockService,
        settings: SettingsService,
        location: LocationService,
        layout: Optional[Layout] = None,
        watchdog: Optional[RenderWatchdog] = None,
        dial_face: Optional[DialFace] = None
    ):
        """
        Raises:
            RenderSurfaceMissingError: If surface is None
        """
        if surface is None:
            raise RenderSurfaceMissingError("Sundial needs a render surface")

        self._surface = surface
        self._clock = clock
        self._settings = settings
        self._location = location
        self._layout = layout or Layout(*surface.size)
        self._watchdog = watchdog
        self._dial_face = dial_face or DialFace()

        self._state = CycleState.IDLE
        self._last_rendered_second: Optional[int] = None
        self._last_frame: Optional[Frame] = None

    @property
    def state(self) -> CycleState:
        return self._state

    @property
    def last_frame(self) -> Optional[Frame]:
        return self._last_frame

    @property
    def layout(self) -> Layout:
        return self._layout

    def tick(self) -> bool:
        """
        Poll the clock and render if the second changed.

        Returns:
            True if a frame was rendered
        """
        current_second = self._clock.get_current_second()
        if current_second == self._last_rendered_second:
            return False
        self._last_rendered_second = current_second
        return self.render() is not None

    def invalidate(self) -> None:
        """Force a redraw on the next tick (after a settings change or resize)."""
        self._last_rendered_second = None

    def render(self) -> Optional[Frame]:
        """
        Redraw the whole scene from a fresh snapshot of the inputs.

        Returns:
            The rendered Frame, or None if a render was already in progress
        """
        if self._state is CycleState.RENDERING:
            logger.warning("Render requested while rendering; ignored")
            return None

        self._state = CycleState.RENDERING
        try:
            frame = self._render_frame()
        finally:
            self._state = CycleState.IDLE

        self._last_frame = frame
        if self._watchdog:
            self._watchdog.record_render()
        return frame

    def _render_frame(self) -> Frame:
        snapshot = self._settings.snapshot()
        when = self._clock.resolve(snapshot.effective_time_override)
        location = self._location.resolve(snapshot.location_override)
        dial = snapshot.dial

        hour = ClockService.dial_hour(when)
        time_string = ClockService.format_time(when)

        surface = self._surface
        surface.clear()
        surface.set_origin(*self._layout.dial_center)

        label_x, label_y = self._layout.time_label_offset()
        surface.text(Point(label_x, label_y), time_string, self._layout.time_font_size(), Theme.INK)

        marks = self._dial_face.draw(surface, location.latitude_degrees, dial)
        projection = render_gnomon(
            surface,
            dial.gnomon_style,
            location.latitude_degrees,
            hour,
            dial.gnomon_length,
        )
        surface.present()

        return Frame(
            time_string=time_string,
            hour=hour,
            location=location,
            dial=dial,
            hour_marks=marks,
            projection=projection,
        )

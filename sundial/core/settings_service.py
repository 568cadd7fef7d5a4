"""
Settings Service - Publishes immutable snapshots of the user's dial preferences
"""
import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from .clock_service import parse_time_override
from .models import (
    DEFAULT_GNOMON_STYLE,
    ClockTime,
    DialConfig,
    GeoLocation,
    GnomonStyle,
    clamp_length_scale,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SettingsSnapshot:
    """Everything the update cycle reads from settings in one tick."""

    dial: DialConfig
    panel_open: bool = False
    time_override: Optional[ClockTime] = None
    location_override: Optional[GeoLocation] = None

    @property
    def effective_time_override(self) -> Optional[ClockTime]:
        """Time override only applies while the settings panel is open."""
        return self.time_override if self.panel_open else None


SettingsListener = Callable[[SettingsSnapshot], None]


class SettingsService:
    """
    Owner of the mutable settings state.

    Each change replaces the current snapshot wholesale and notifies
    subscribers, so readers never see a partially applied change.
    """

    def __init__(self, dial: Optional[DialConfig] = None):
        self._snapshot = SettingsSnapshot(dial=dial or DialConfig())
        self._listeners: List[SettingsListener] = []

    @classmethod
    def from_config(cls, config) -> 'SettingsService':
        """
        Build from the 'dial' section of a ConfigService.

        Unknown style names fall back to the default style.
        """
        style_name = config.get('dial.gnomon_style', DEFAULT_GNOMON_STYLE.value)
        style = GnomonStyle.parse(style_name)
        if style is None:
            logger.warning(f"Unknown gnomon style {style_name!r}, using {DEFAULT_GNOMON_STYLE.value}")
            style = DEFAULT_GNOMON_STYLE
        dial = DialConfig(
            gnomon_style=style,
            gnomon_length_scale=config.get('dial.gnomon_length_scale', 0.8),
            show_compass_rose=bool(config.get('dial.show_compass_rose', False)),
        )
        return cls(dial)

    def snapshot(self) -> SettingsSnapshot:
        """Current immutable settings."""
        return self._snapshot

    def subscribe(self, listener: SettingsListener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, snapshot: SettingsSnapshot) -> None:
        if snapshot == self._snapshot:
            return
        self._snapshot = snapshot
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Settings listener failed")

    def set_gnomon_style(self, style) -> None:
        """Select a gnomon style by enum or name; unknown names are ignored."""
        parsed = GnomonStyle.parse(style)
        if parsed is None:
            logger.warning(f"Ignoring unknown gnomon style {style!r}")
            return
        self._publish(replace(self._snapshot, dial=replace(self._snapshot.dial, gnomon_style=parsed)))

    def set_gnomon_length_scale(self, scale: float) -> None:
        """Set the length scale; out-of-range values are clamped."""
        dial = replace(self._snapshot.dial, gnomon_length_scale=clamp_length_scale(scale))
        self._publish(replace(self._snapshot, dial=dial))

    def set_show_compass_rose(self, show: bool) -> None:
        dial = replace(self._snapshot.dial, show_compass_rose=bool(show))
        self._publish(replace(self._snapshot, dial=dial))

    def set_panel_open(self, is_open: bool) -> None:
        self._publish(replace(self._snapshot, panel_open=bool(is_open)))

    def toggle_panel(self) -> bool:
        """
        Flip settings panel visibility.

        Returns:
            New visibility
        """
        self.set_panel_open(not self._snapshot.panel_open)
        return self._snapshot.panel_open

    def set_time_override(self, value: Optional[str]) -> Optional[ClockTime]:
        """
        Set the time override from 'HH:MM' text.

        Empty text clears the override; malformed text leaves it unchanged.

        Returns:
            The override now in effect
        """
        if not value:
            self._publish(replace(self._snapshot, time_override=None))
            return None
        override = parse_time_override(value)
        if override is not None:
            self._publish(replace(self._snapshot, time_override=override))
        return self._snapshot.time_override

    def set_location_override(self, latitude: Optional[float], longitude: Optional[float]) -> None:
        """Set a custom location; invalid coordinates are ignored, None clears it."""
        if latitude is None or longitude is None:
            self._publish(replace(self._snapshot, location_override=None))
            return
        try:
            location = GeoLocation(float(latitude), float(longitude))
        except (TypeError, ValueError):
            logger.warning(f"Ignoring location override {latitude!r}, {longitude!r}")
            return
        if not location.is_valid():
            logger.warning(f"Ignoring out-of-range location override {latitude!r}, {longitude!r}")
            return
        self._publish(replace(self._snapshot, location_override=location))

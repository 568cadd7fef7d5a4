"""
Main entry point for the sundial
"""
import sys
import signal
from pathlib import Path
from typing import Optional

from .core.clock_service import ClockService
from .core.config_service import ConfigService, config as default_config
from .core.location_service import LocationService
from .core.logging_service import get_logger
from .core.settings_service import SettingsService, SettingsSnapshot
from .core.watchdog import RenderWatchdog
from .ui.image_surface import ImageSurface
from .ui.layout import Layout
from .update_cycle import Frame, UpdateCycle


class Application:
    """
    Wires configuration, services and the display together.
    """

    def __init__(self, config: Optional[ConfigService] = None):
        self._config = config or default_config
        self._config.reload()
        self._config.validate()

        self._logger = get_logger('sundial', self._config.get('logging.level', 'INFO'))
        version = self._config.get('app.version', '1.0.0')
        self._logger.log_startup(version, self._get_config_summary())

        self._clock: Optional[ClockService] = None
        self._settings: Optional[SettingsService] = None
        self._location: Optional[LocationService] = None
        self._watchdog: Optional[RenderWatchdog] = None
        self._main_window = None
        self._shut_down = False

    def _get_config_summary(self) -> dict:
        """Configuration summary for the startup banner"""
        return {
            'timezone': self._config.get('timezone'),
            'location': self._config.get('location', {}),
            'dial': self._config.get('dial', {}),
            'display': self._config.get('display', {}),
        }

    def _initialize_services(self) -> None:
        self._logger.info("Initializing services")

        self._clock = ClockService(self._config.get('timezone') or None)
        self._settings = SettingsService.from_config(self._config)
        self._settings.subscribe(self._on_settings_changed)

        self._location = LocationService.from_config(self._config)
        if self._config.get('location.auto_locate', False):
            self._location.locate()
            if self._location.last_error:
                current = self._location.current
                self._logger.warning(
                    f"Location lookup failed ({self._location.last_error}), using "
                    f"lat={current.latitude_degrees:.4f} lon={current.longitude_degrees:.4f}"
                )

        self._watchdog = RenderWatchdog(
            check_interval=self._config.get('health.check_interval', 5),
            timeout=self._config.get('health.timeout', 15),
        )
        self._watchdog.on_stall(self._on_render_stall)
        self._watchdog.on_recover(self._on_render_recover)

    def _build_cycle(self, surface, layout: Layout) -> UpdateCycle:
        if not layout.fits_dial():
            width, height = layout.dimensions
            self._logger.warning(f"Display {width}x{height} is too small to show the whole dial")
        return UpdateCycle(
            surface,
            clock=self._clock,
            settings=self._settings,
            location=self._location,
            layout=layout,
            watchdog=self._watchdog,
        )

    def _on_settings_changed(self, snapshot: SettingsSnapshot) -> None:
        dial = snapshot.dial
        self._logger.debug(
            f"Settings changed: style={dial.gnomon_style.value} "
            f"scale={dial.gnomon_length_scale} compass={dial.show_compass_rose} "
            f"panel={'open' if snapshot.panel_open else 'closed'}"
        )
        if self._main_window:
            self._main_window.invalidate()

    def _on_render_stall(self, elapsed: float) -> None:
        self._logger.error(f"Dial has not redrawn for {elapsed:.1f}s")

    def _on_render_recover(self) -> None:
        self._logger.info("Dial redraw recovered")

    def render_snapshot(self, path: Path) -> Frame:
        """
        Render a single frame to a PNG file.

        Returns:
            The rendered frame
        """
        width = self._config.get('display.width', 900)
        height = self._config.get('display.height', 760)
        surface = ImageSurface(width, height, output_path=path, scale=2)
        frame = self._build_cycle(surface, Layout(width, height)).render()
        self._logger.info(
            f"Snapshot written to {path} ({frame.time_string}, "
            f"{'shadow' if frame.has_shadow else 'no shadow'})"
        )
        return frame

    def _setup_signal_handlers(self) -> None:
        """Graceful shutdown on SIGINT/SIGTERM"""
        def signal_handler(signum, frame):
            self._logger.info(f"Received signal {signum}, shutting down")
            self.shutdown()
            sys.exit(0)

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

    def run(self) -> None:
        """Run the window, or write one snapshot when snapshot.path is set"""
        try:
            self._initialize_services()

            snapshot_path = self._config.get('snapshot.path')
            if snapshot_path:
                self.render_snapshot(Path(snapshot_path))
                return

            self._setup_signal_handlers()

            from .ui.main_window import MainWindow

            self._main_window = MainWindow(
                cycle_factory=self._build_cycle,
                settings=self._settings,
                location=self._location,
                logger=self._logger,
                width=self._config.get('display.width', 900),
                height=self._config.get('display.height', 760),
                fullscreen=self._config.get('display.fullscreen', False),
                frame_interval=self._config.get('display.frame_interval_ms', 16),
            )
            self._main_window.initialize()
            self._watchdog.start()
            self._logger.info("Application started successfully")

            self._main_window.start()

        except KeyboardInterrupt:
            self._logger.info("Keyboard interrupt received")
        except Exception as e:
            self._logger.critical(f"Fatal error: {e}", exc_info=True)
            raise
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        if self._shut_down:
            return
        self._shut_down = True
        self._logger.info("Shutting down application")

        if self._main_window and self._main_window.is_running():
            self._main_window.stop()

        if self._watchdog:
            self._watchdog.stop()

        self._logger.log_shutdown()


def main():
    """Main entry point"""
    app = Application()
    app.run()


if __name__ == '__main__':
    main()

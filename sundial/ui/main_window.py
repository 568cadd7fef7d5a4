"""
Main Window - Tkinter sundial display with a frame-driven tick loop
"""
import tkinter as tk
from typing import Callable, Optional

from ..core.location_service import LocationService
from ..core.logging_service import LoggingService
from ..core.settings_service import SettingsService
from ..update_cycle import UpdateCycle
from .layout import Layout
from .theme import Theme
from .tk_surface import TkCanvasSurface


class MainWindow:
    """
    Tk window hosting the dial canvas.

    The window polls the update cycle every frame; the cycle itself decides
    whether the second changed and a redraw is due.
    """

    def __init__(
        self,
        cycle_factory: Callable[[TkCanvasSurface, Layout], UpdateCycle],
        settings: SettingsService,
        location: LocationService,
        logger: LoggingService,
        width: int = 900,
        height: int = 760,
        fullscreen: bool = False,
        frame_interval: int = 16
    ):
        """
        Args:
            cycle_factory: Builds the UpdateCycle once the canvas exists
            settings: Settings service (panel toggle)
            location: Location service (lookup on demand)
            logger: Logging service
            width: Window width
            height: Window height
            fullscreen: Whether to run fullscreen
            frame_interval: Tick polling interval in milliseconds
        """
        self._cycle_factory = cycle_factory
        self._settings = settings
        self._location = location
        self._logger = logger

        self._width = width
        self._height = height
        self._fullscreen = fullscreen
        self._frame_interval = frame_interval

        self._root: Optional[tk.Tk] = None
        self._canvas: Optional[tk.Canvas] = None
        self._surface: Optional[TkCanvasSurface] = None
        self._cycle: Optional[UpdateCycle] = None
        self._after_id: Optional[str] = None
        self._running = False

    def initialize(self) -> None:
        """Create window, canvas and update cycle"""
        self._logger.info("Initializing UI window")

        self._root = tk.Tk()
        self._root.title("Sundial")
        bg = Theme.to_hex(Theme.BACKGROUND, Theme.BACKGROUND)
        self._root.configure(bg=bg)

        if self._fullscreen:
            self._root.attributes('-fullscreen', True)
            self._root.config(cursor='none')
        else:
            self._root.geometry(f"{self._width}x{self._height}")

        self._canvas = tk.Canvas(
            self._root,
            width=self._width,
            height=self._height,
            bg=bg,
            highlightthickness=0
        )
        self._canvas.pack(fill=tk.BOTH, expand=True)

        self._surface = TkCanvasSurface(self._canvas, self._width, self._height)
        self._cycle = self._cycle_factory(self._surface, Layout(self._width, self._height))

        self._root.bind('<Escape>', self._exit_fullscreen)
        self._root.bind('<KeyPress-s>', self._toggle_settings)
        self._root.bind('<KeyPress-l>', self._locate)
        self._canvas.bind('<Configure>', self._on_resize)
        self._root.protocol("WM_DELETE_WINDOW", self.stop)

        self._logger.info(f"UI initialized: {self._width}x{self._height}")

    def _frame(self) -> None:
        """One animation frame: let the cycle decide whether to redraw"""
        if not self._running:
            return

        try:
            self._cycle.tick()
        except Exception as e:
            self._logger.error(f"Dial update error: {e}", exc_info=True)

        if self._running and self._root:
            self._after_id = self._root.after(self._frame_interval, self._frame)

    def _on_resize(self, event) -> None:
        if (event.width, event.height) == (self._width, self._height):
            return
        self._width, self._height = event.width, event.height
        self._surface.resize(event.width, event.height)
        self._cycle.layout.update_dimensions(event.width, event.height)
        self._cycle.invalidate()

    def _toggle_settings(self, event=None) -> None:
        is_open = self._settings.toggle_panel()
        self._logger.info(f"Settings panel {'opened' if is_open else 'closed'}")
        self._cycle.invalidate()

    def _locate(self, event=None) -> None:
        self._location.locate()
        if self._location.last_error:
            self._logger.warning(f"Keeping previous location: {self._location.last_error}")
        self._cycle.invalidate()

    def _exit_fullscreen(self, event=None) -> None:
        if self._root and self._fullscreen:
            self._root.attributes('-fullscreen', False)
            self._root.config(cursor='')
            self._fullscreen = False
            self._logger.info("Exited fullscreen mode")

    def start(self) -> None:
        """Start the Tk event loop (blocking)"""
        if not self._root:
            self.initialize()

        self._logger.info("Starting UI event loop")
        self._running = True
        self._after_id = self._root.after(0, self._frame)
        self._root.mainloop()

    def stop(self) -> None:
        """Stop ticking and destroy the window; an in-flight render completes first"""
        self._logger.info("Stopping UI")
        self._running = False

        if self._root:
            if self._after_id:
                self._root.after_cancel(self._after_id)
                self._after_id = None
            try:
                self._root.quit()
                self._root.destroy()
            except tk.TclError as e:
                self._logger.error(f"Error during UI cleanup: {e}")

        self._root = None

    def invalidate(self) -> None:
        """Redraw on the next frame"""
        if self._cycle:
            self._cycle.invalidate()

    def is_running(self) -> bool:
        return self._running

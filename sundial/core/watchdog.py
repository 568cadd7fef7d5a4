"""
Render Watchdog - Detects a dial that has stopped redrawing
"""
import logging
import time
from threading import Event, Lock, Thread
from typing import Callable, Optional


logger = logging.getLogger(__name__)


class RenderWatchdog:
    """
    Tracks the time of the last completed render.

    A stalled dial looks identical to a frozen one, so the watchdog reports
    a stall once no render has completed within `timeout` seconds, and a
    recovery on the next render after that.
    """

    def __init__(self, check_interval: float = 5, timeout: float = 15,
                 clock: Callable[[], float] = time.monotonic):
        """
        Args:
            check_interval: Seconds between background checks
            timeout: Seconds without a render before reporting a stall
            clock: Monotonic time source
        """
        self._check_interval = check_interval
        self._timeout = timeout
        self._clock = clock

        self._lock = Lock()
        self._last_render: float = clock()
        self._renders = 0
        self._stalled = False

        self._thread: Optional[Thread] = None
        self._stop_event = Event()

        self._on_stall: Optional[Callable[[float], None]] = None
        self._on_recover: Optional[Callable[[], None]] = None

    def on_stall(self, callback: Callable[[float], None]) -> None:
        """Callback receives the seconds elapsed since the last render."""
        self._on_stall = callback

    def on_recover(self, callback: Callable[[], None]) -> None:
        self._on_recover = callback

    def record_render(self) -> None:
        """Called by the update cycle after every completed render."""
        with self._lock:
            self._last_render = self._clock()
            self._renders += 1
            was_stalled = self._stalled
            self._stalled = False

        if was_stalled and self._on_recover:
            try:
                self._on_recover()
            except Exception:
                logger.exception("Watchdog recover callback failed")

    def seconds_since_render(self) -> float:
        with self._lock:
            return self._clock() - self._last_render

    def check(self) -> bool:
        """
        Evaluate the stall condition once.

        Returns:
            True while renders are arriving on time
        """
        elapsed = self.seconds_since_render()
        with self._lock:
            was_stalled = self._stalled
            self._stalled = elapsed >= self._timeout
            just_stalled = self._stalled and not was_stalled

        if just_stalled and self._on_stall:
            try:
                self._on_stall(elapsed)
            except Exception:
                logger.exception("Watchdog stall callback failed")

        return not self._stalled

    def start(self) -> None:
        """Start background checks on a daemon thread"""
        if self._thread is not None:
            return
        self._stop_event.clear()
        self._thread = Thread(target=self._run, name='render-watchdog', daemon=True)
        self._thread.start()

    def stop(self) -> None:
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join(timeout=2)
        self._thread = None

    def _run(self) -> None:
        while not self._stop_event.wait(self._check_interval):
            self.check()

    @property
    def render_count(self) -> int:
        return self._renders

    @property
    def is_running(self) -> bool:
        return self._thread is not None

"""
Logging Service - Console logging for the sundial application
"""
import sys
import logging
from typing import Any, Dict, Optional


LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggingService:
    """
    Wraps the 'sundial' logger hierarchy with a stdout handler.

    Library modules log via logging.getLogger(__name__) and inherit the
    handler and level configured here.
    """

    def __init__(self, name: str = 'sundial', level: str = 'INFO'):
        """
        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        self._logger = logging.getLogger(name)
        self._set_level(level)
        self._setup_handlers()

    def _set_level(self, level: str) -> None:
        """Set logging level from string, INFO when unknown"""
        log_level = logging.getLevelName(str(level).upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO
        self._logger.setLevel(log_level)

    def _setup_handlers(self) -> None:
        """Replace existing handlers with a formatted stdout handler"""
        self._logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self._logger.level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

        self._logger.addHandler(console_handler)

    def debug(self, message: str, **kwargs) -> None:
        self._logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._logger.warning(message, extra=kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        """
        Log error message.

        Args:
            message: Error message
            exc_info: Include exception traceback
            **kwargs: Additional context
        """
        self._logger.error(message, exc_info=exc_info, extra=kwargs)

    def critical(self, message: str, exc_info: bool = False, **kwargs) -> None:
        self._logger.critical(message, exc_info=exc_info, extra=kwargs)

    def log_startup(self, version: str, summary: Dict[str, Any]) -> None:
        """
        Log application startup information.

        Args:
            version: Application version
            summary: Configuration summary (location, dial, display)
        """
        location = summary.get('location', {})
        dial = summary.get('dial', {})
        display = summary.get('display', {})
        self.info("=" * 60)
        self.info(f"Sundial v{version} starting up")
        self.info(f"Python: {sys.version.split()[0]}")
        self.info(f"Timezone: {summary.get('timezone') or 'local'}")
        self.info(f"Location: lat={location.get('latitude')} lon={location.get('longitude')}")
        self.info(
            f"Gnomon: {dial.get('gnomon_style')} scale={dial.get('gnomon_length_scale')}"
            f" compass={'on' if dial.get('show_compass_rose') else 'off'}"
        )
        self.info(f"Display: {display.get('width', 0)}x{display.get('height', 0)}")
        self.info("=" * 60)

    def log_shutdown(self) -> None:
        self.info("=" * 60)
        self.info("Sundial shutting down")
        self.info("=" * 60)


_logging_service: Optional[LoggingService] = None


def get_logger(name: str = 'sundial', level: str = 'INFO') -> LoggingService:
    """
    Get or create the logging service singleton.

    Args:
        name: Logger name
        level: Log level

    Returns:
        LoggingService instance
    """
    global _logging_service
    if _logging_service is None:
        _logging_service = LoggingService(name, level)
    return _logging_service

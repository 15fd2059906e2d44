"""
Huelab Logging
loguru setup for the engine host. Every record carries the service name and
package version; rejected engine input is logged with its stable error code.
"""
import sys
from typing import Any, Dict, Optional

from loguru import logger

from huelab import __version__
from huelab.config import config
from huelab.services.colors.errors import ColorEngineError

SERVICE_NAME = "huelab-color-engine"
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {extra[service]} | {message} | {extra}"


class EngineLogger:
    """Configures the loguru sink and logs with the service context bound."""

    def __init__(self, level: Optional[str] = None):
        self.level = level or config.LOG_LEVEL
        logger.remove()
        # Module-level loguru calls in the engine pick up the same context
        logger.configure(extra={"service": SERVICE_NAME, "version": __version__})
        logger.add(sys.stdout, format=LOG_FORMAT, level=self.level)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        logger.bind(**(extra or {})).debug(message)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        logger.bind(**(extra or {})).warning(message)

    def engine_error(self, path: str, error: ColorEngineError):
        """Log a rejected engine input at warning level."""
        self.warning(
            "Rejected color engine input",
            {"path": path, "code": error.code, "detail": error.message},
        )


_logger: Optional[EngineLogger] = None


def get_logger() -> EngineLogger:
    """Get or create the process-wide engine logger."""
    global _logger
    if _logger is None:
        _logger = EngineLogger()
    return _logger

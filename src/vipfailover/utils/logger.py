"""
Logging helpers built on loguru.

Modules get their logger via ``get_logger(__name__)``; the process entry
point calls ``configure_logging`` once with the configured LogLevel.
"""

import sys
import traceback

from loguru import logger as _logger

from vipfailover.models.enums import LogLevel

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> | "
    "<level>{message}</level>"
)

_LOGURU_LEVELS = {
    LogLevel.FULL: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARNING",
}


def _format(record) -> str:
    # Records from unbound loggers fall back to the emitting module
    record["extra"].setdefault("name", record["name"])
    return LOG_FORMAT + "\n{exception}"


def configure_logging(level: LogLevel = LogLevel.INFO, log_file: str = "") -> None:
    """
    Replace loguru's handlers with vipfailover's console (and file) sinks.

    Args:
        level: Verbosity; FULL also enables variable values in tracebacks.
        log_file: Optional path of an additional log file.
    """
    loguru_level = _LOGURU_LEVELS[LogLevel(level)]
    full = level == LogLevel.FULL

    _logger.remove()
    _logger.add(
        sys.stderr,
        level=loguru_level,
        format=_format,
        backtrace=full,
        diagnose=full,
    )
    if log_file:
        _logger.add(
            log_file,
            level=loguru_level,
            format=_format,
            colorize=False,
            rotation="10 MB",
            backtrace=full,
            diagnose=full,
        )


def get_logger(name: str):
    """Get a logger bound to a module name."""
    return _logger.bind(name=name)


def format_traceback(exc: BaseException) -> str:
    """Render an exception with its traceback."""
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

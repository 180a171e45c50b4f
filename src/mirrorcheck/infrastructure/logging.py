"""Loguru-based logging setup.

Handlers are installed once per process. ``get_logger`` configures defaults
on first use so library callers never see an unconfigured logger.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    from loguru import Logger

_DEVELOPMENT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
_PRODUCTION_FORMAT = (
    "{time:YYYY-MM-DD[T]HH:mm:ssZ} [{level}] {extra[name]}: {message}"
)

_configured = False


def configure_logger(
    level: LogLevel = LogLevel.INFO,
    environment: Environment = Environment.PRODUCTION,
) -> None:
    """Install the stderr sink for the given level and environment."""
    global _configured

    logger.remove()
    logger.configure(extra={"name": "mirrorcheck"})
    if environment == Environment.DEVELOPMENT:
        logger.add(
            sys.stderr,
            level=level.value,
            format=_DEVELOPMENT_FORMAT,
            colorize=True,
            backtrace=True,
            diagnose=True,
        )
    else:
        logger.add(
            sys.stderr,
            level=level.value,
            format=_PRODUCTION_FORMAT,
            colorize=False,
            backtrace=False,
            diagnose=False,
        )
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "Logger":
    """Return a logger bound to ``name``, configuring defaults if needed."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def is_configured() -> bool:
    """Whether a sink has been installed."""
    return _configured


def reset_logging() -> None:
    """Remove all sinks and forget the configuration (used by tests)."""
    global _configured

    logger.remove()
    _configured = False

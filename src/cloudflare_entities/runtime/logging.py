"""Loguru configuration.

The library itself only emits records; :func:`setup_logging` is called by
entry points such as the CLI.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

from cloudflare_entities.runtime.settings import EnvironmentVariables, get_settings

_LOGGING_CONFIGURED = False

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - {message}"
)


class InterceptHandler(logging.Handler):
    """Route stdlib ``logging`` records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(settings: EnvironmentVariables | None = None, *, force: bool = False) -> None:
    """Configure loguru sinks from settings. Later calls are no-ops unless ``force``."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED and not force:
        return

    config = settings or get_settings()

    logger.remove()
    logger.add(
        sys.stderr,
        level=config.log_level.upper(),
        format=LOG_FORMAT,
        colorize=not config.log_json,
        serialize=config.log_json,
        backtrace=True,
        diagnose=config.environment == "development",
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    _LOGGING_CONFIGURED = True
    logger.debug(f"Logging configured at {config.log_level} for {config.environment}")

"""Logging configuration using loguru."""

import sys
from pathlib import Path

from loguru import logger

from scrapebadger.config.settings import Settings

# Handler ids added by setup_logging; sinks registered by the application are never touched
_handler_ids: list[int] = []


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
    settings: Settings | None = None,
    stderr: bool = True,
) -> None:
    """
    Enable SDK logging and configure loguru sinks.

    The SDK keeps its logger disabled until this is called, so importing
    the package never writes to the application's output. Calling it again
    replaces the sinks from the previous call only. Applications that
    already log to stderr through loguru can pass ``stderr=False`` to
    avoid duplicated lines.
    """
    settings = settings or Settings()
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    remove_logging()

    log_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    if stderr:
        _handler_ids.append(
            logger.add(
                sys.stderr,
                format=log_format,
                level=level,
                colorize=True,
            )
        )

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)

        _handler_ids.append(
            logger.add(
                path,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
                level=level,
                rotation="10 MB",
                retention="7 days",
                compression="zip",
            )
        )

    logger.enable("scrapebadger")
    logger.info(f"Logging initialized at level {level}")


def remove_logging() -> None:
    """Remove the sinks added by :func:`setup_logging`."""
    while _handler_ids:
        handler_id = _handler_ids.pop()
        try:
            logger.remove(handler_id)
        except ValueError:
            # Already removed by the application
            logger.debug(f"Log handler {handler_id} was already removed")

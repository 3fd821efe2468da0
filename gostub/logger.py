"""Structured logging configuration using structlog."""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from gostub.config import settings

if TYPE_CHECKING:
    from structlog.types import Processor

# Event dict stages shared by the console, JSON and file renderers
PRE_CHAIN: list["Processor"] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.format_exc_info,
]


def _renderer() -> "Processor":
    if settings.logging.format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=settings.logging.console_colorized)


def setup_logging(level: str | None = None, force: bool = False) -> None:
    """Route gostub diagnostics through structlog to stderr.

    Args:
        level: Overrides ``logging.level`` from settings when given.
        force: Replace handlers already installed on the root logger. Left
            off at import so a host program keeps its own logging setup.
    """
    log_level = getattr(logging, (level or settings.logging.level).upper())

    structlog.configure(
        processors=[*PRE_CHAIN, _renderer()],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # stdout is reserved for generated output
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
        force=force,
    )

    if settings.logging.file_enabled:
        setup_file_logging(log_level)


def setup_file_logging(log_level: int) -> None:
    """Also write diagnostics to a daily rotated file."""
    log_path = Path(settings.logging.file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = TimedRotatingFileHandler(
        filename=str(log_path),
        when=settings.logging.file_rotation[0],  # 'd' for daily
        backupCount=settings.logging.file_retention_days,
        encoding="utf-8",
    )
    handler.setLevel(log_level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=PRE_CHAIN,
        )
    )
    logging.getLogger().addHandler(handler)


def get_logger(name: str | None = None, **context: Any) -> structlog.BoundLogger:
    """Get a structlog logger, optionally bound to ``context``."""
    logger: structlog.BoundLogger = structlog.get_logger(name)
    return logger.bind(**context) if context else logger


setup_logging()

"""Structured logging setup."""

import logging
from typing import Optional

import structlog

from ..config import settings

_RENDERERS = {
    "json": structlog.processors.JSONRenderer,
    "plain": structlog.dev.ConsoleRenderer,
}


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure structlog on top of the standard library root logger.

    Args:
        level: Log level name, defaults to settings.log_level
        fmt: Renderer, "json" or "plain", defaults to settings.log_format
    """
    level = (level or settings.log_level).upper()
    fmt = (fmt or settings.log_format).lower()

    if fmt not in _RENDERERS:
        raise ValueError(f"Unknown log format: {fmt}")

    logging.basicConfig(format="%(message)s", level=level, force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            _RENDERERS[fmt](),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

import logging
from typing import Any

import structlog

from memberquery.config import settings

SQL_LOGGER_NAME = "sqlalchemy.engine"


def _level(name: str, default: int) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default


def configure_logging() -> None:
    """Route structlog through stdlib logging.

    ``sql_log_level`` governs the SQLAlchemy engine logger separately, so the
    content and count statements issued for a page can be surfaced with
    ``SQL_LOG_LEVEL=INFO`` without turning the whole service to debug.
    """
    logging.basicConfig(format="%(message)s", level=_level(settings.log_level, logging.INFO))
    logging.getLogger(SQL_LOGGER_NAME).setLevel(_level(settings.sql_log_level, logging.WARNING))

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    renderer = structlog.processors.JSONRenderer() if settings.log_json else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[structlog.stdlib.filter_by_level, *shared_processors, renderer],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    return structlog.get_logger(name)

"""Logging configuration for the Storefront.

Standard-library logging owns the output (stdout plus a rotating file under
``logs/``) and structlog formats records on top of it. Production and staging
render JSON; everywhere else gets the coloured console renderer.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

import structlog

_LEVEL_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

# Suppress noisy library loggers
logging.getLogger("protean").setLevel(logging.WARNING)
logging.getLogger("asyncio").setLevel(logging.WARNING)


def _environment() -> str:
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def _renderer(env: str):
    if env in ("production", "staging"):
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [
        structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=True, max_frames=2),
        )
    ]


def configure_logging(log_dir: str = "logs") -> None:
    env = _environment()
    level = os.getenv("LOG_LEVEL", _LEVEL_BY_ENV.get(env, "INFO"))

    Path(log_dir).mkdir(exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        filename=Path(log_dir) / "storefront.log",
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    root = logging.getLogger()
    root.handlers = [logging.StreamHandler(sys.stdout), file_handler]
    root.setLevel(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            *_renderer(env),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

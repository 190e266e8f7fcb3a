"""Library logging on top of structlog and the stdlib ``habitica`` logger.

Every module logs through ``get_logger(name)``, which wraps the stdlib logger
``habitica.<name>``. The ``habitica`` logger carries only a ``NullHandler``,
so nothing is printed unless the application configures logging itself or
calls :func:`setup_logging`.
"""

import logging
import os
import sys
from typing import TextIO

import structlog

LOGGER_NAME = "habitica"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

_handler: logging.Handler | None = None


def setup_logging(
    level: str | None = None,
    json_format: bool | None = None,
    stream: TextIO | None = None,
) -> None:
    """Send the library's log events to a stream.

    Only the ``habitica`` logger is touched; the root logger and the
    application's own handlers are left alone. Calling it again replaces the
    handler installed by the previous call.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL env var or INFO.
        json_format: If True, emit JSON lines. Defaults to LOG_FORMAT env var == 'json'.
        stream: Where to write. Defaults to stderr.
    """
    global _handler

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if json_format is None:
        json_format = os.getenv("LOG_FORMAT", "console").lower() == "json"

    library_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        library_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    library_logger.addHandler(_handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        renderer = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        renderer = [structlog.dev.ConsoleRenderer(colors=False)]

    structlog.configure(
        processors=shared_processors + renderer,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get the structured logger for a library module.

    Args:
        name: Module name, e.g. 'http' for ``habitica.http``.
    """
    return structlog.wrap_logger(
        logging.getLogger(f"{LOGGER_NAME}.{name}"),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

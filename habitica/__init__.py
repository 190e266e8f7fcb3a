"""Async client for the Habitica API."""

__version__ = "0.1.0"

from .client import Habitica
from .connection import Connection
from .errors import format_error
from .exceptions import ApiError, HabiticaError, UnknownConnectionError
from .logging import get_logger, setup_logging
from .models import ConnectionConfig, RequestOptions

__all__ = [
    "Habitica",
    "Connection",
    "ConnectionConfig",
    "RequestOptions",
    "format_error",
    "HabiticaError",
    "ApiError",
    "UnknownConnectionError",
    "setup_logging",
    "get_logger",
    "__version__",
]

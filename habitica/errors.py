"""Conversion of raw transport failures into typed Habitica errors."""

import json

from .exceptions import ApiError, HabiticaError, UnknownConnectionError
from .logging import get_logger

logger = get_logger("errors")


def format_error(error: BaseException) -> HabiticaError:
    """Turn a failed request into an ``ApiError`` or ``UnknownConnectionError``.

    An ``ApiError`` is produced only when the failure carries an error
    response whose body is a JSON object. Anything else (network failures,
    timeouts, empty or malformed bodies) becomes an ``UnknownConnectionError``
    wrapping the original exception.

    Args:
        error: The exception raised by the transport.

    Returns:
        The typed error to hand back to the caller.
    """
    response = getattr(error, "response", None)

    if response is not None and response.is_error:
        try:
            data = json.loads(response.text)
        except ValueError:
            data = None

        if isinstance(data, dict):
            logger.warning(
                "api_error",
                status=response.status_code,
                type=data.get("error"),
                message=data.get("message"),
            )
            return ApiError(
                type=data.get("error"),
                status=response.status_code,
                message=data.get("message"),
            )

        logger.warning(
            "unreadable_error_body",
            status=response.status_code,
            body=response.text[:200],
        )
        return UnknownConnectionError(error)

    logger.warning(
        "unknown_connection_error",
        error_type=type(error).__name__,
        error=str(error),
    )
    return UnknownConnectionError(error)

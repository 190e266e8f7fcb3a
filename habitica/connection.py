"""Authenticated request dispatch for the Habitica API."""

import inspect
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import httpx

from .config import DEFAULT_ENDPOINT, DEFAULT_PLATFORM, HTTP_DEFAULT_TIMEOUT
from .errors import format_error
from .exceptions import HabiticaError
from .http import HTTPClient
from .logging import get_logger
from .models import ConnectionConfig, RequestOptions
from .routes import build_url, normalize_endpoint

logger = get_logger("connection")

ErrorHandler = Callable[[HabiticaError], Any]


class _Unset:
    """Marker for keyword arguments that were not passed."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


class Connection:
    """Single authenticated request dispatcher.

    Every verb method sends exactly one request. Routes are placed under the
    versioned API prefix unless they are top-level routes (see
    :mod:`habitica.routes`). Credentials are sent only when both ``id`` and
    ``api_key`` are set.

    The URL and headers are captured when the verb method is called, so a
    later :meth:`configure` does not affect a request that was already
    issued.

    Example:
        connection = Connection(id="user-uuid", api_key="api-token")
        user = await connection.get("/user")
        await connection.post("/user/tasks", {"send": {"text": "Read", "type": "todo"}})
    """

    def __init__(
        self,
        id: str | None = None,
        api_key: str | None = None,
        endpoint: str | None = DEFAULT_ENDPOINT,
        platform: str | None = DEFAULT_PLATFORM,
        error_handler: ErrorHandler | None = None,
        timeout: float = HTTP_DEFAULT_TIMEOUT,
    ):
        """Initialize the connection.

        Args:
            id: Habitica user id.
            api_key: Habitica API token.
            endpoint: Base URL of the server. Falls back to the default when empty.
            platform: Value of the ``x-client`` header. Falls back to the default when empty.
            error_handler: Optional hook called with every formatted error.
            timeout: Request timeout in seconds.
        """
        self._id: str | None = None
        self._api_key: str | None = None
        self._endpoint: str = DEFAULT_ENDPOINT
        self._platform: str | None = DEFAULT_PLATFORM
        self._error_handler: ErrorHandler | None = None
        self.http = HTTPClient(timeout)

        self.configure(
            id=id,
            api_key=api_key,
            endpoint=endpoint or DEFAULT_ENDPOINT,
            platform=platform or DEFAULT_PLATFORM,
            error_handler=error_handler,
        )

    def configure(
        self,
        *,
        id: str | None = UNSET,
        api_key: str | None = UNSET,
        endpoint: str = UNSET,
        platform: str | None = UNSET,
        error_handler: ErrorHandler | None = UNSET,
    ) -> None:
        """Update settings in place.

        Only the arguments actually passed are changed; passing ``None``
        explicitly clears a value.

        Raises:
            ValueError: If ``endpoint`` is passed but is not a non-empty string.
        """
        if id is not UNSET:
            self._id = id
        if api_key is not UNSET:
            self._api_key = api_key
        if endpoint is not UNSET:
            if not isinstance(endpoint, str) or not endpoint:
                raise ValueError("endpoint must be a non-empty string")
            self._endpoint = normalize_endpoint(endpoint)
        if platform is not UNSET:
            self._platform = platform
        if error_handler is not UNSET:
            self._error_handler = error_handler

    def get_config(self) -> ConnectionConfig:
        """Return a snapshot of the current settings."""
        return ConnectionConfig(
            id=self._id,
            api_key=self._api_key,
            endpoint=self._endpoint,
            platform=self._platform,
        )

    def get(
        self,
        route: str,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> Awaitable[Any]:
        """Send a GET request."""
        return self._router("GET", route, options)

    def post(
        self,
        route: str,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> Awaitable[Any]:
        """Send a POST request."""
        return self._router("POST", route, options)

    def put(
        self,
        route: str,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> Awaitable[Any]:
        """Send a PUT request."""
        return self._router("PUT", route, options)

    def delete(
        self,
        route: str,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> Awaitable[Any]:
        """Send a DELETE request."""
        return self._router("DELETE", route, options)

    def _headers(self) -> dict[str, str]:
        headers = {"accept": "application/json"}
        if self._platform is not None:
            headers["x-client"] = self._platform
        if self._id and self._api_key:
            headers["x-api-user"] = self._id
            headers["x-api-key"] = self._api_key
        return headers

    def _router(
        self,
        method: str,
        route: str,
        options: RequestOptions | Mapping[str, Any] | None,
    ) -> Awaitable[Any]:
        """Build the request now and return the coroutine that sends it."""
        if options is None:
            options = RequestOptions()
        elif not isinstance(options, RequestOptions):
            options = RequestOptions.model_validate(dict(options))

        request = self.http.build_request(
            method,
            build_url(self._endpoint, route),
            params=options.query,
            headers=self._headers(),
            json_data=options.send,
        )
        return self._dispatch(request, self._error_handler)

    async def _dispatch(
        self,
        request: httpx.Request,
        error_handler: ErrorHandler | None,
    ) -> Any:
        try:
            response = await self.http.send(request)
            if not response.content:
                return None
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            cause = e

        formatted = format_error(cause)
        if error_handler is None:
            raise formatted from cause

        result = error_handler(formatted)
        if inspect.isawaitable(result):
            result = await result

        if result is None:
            raise formatted from cause
        if not isinstance(result, BaseException):
            raise TypeError(
                f"error handler must return an exception, got {type(result).__name__}"
            ) from formatted

        logger.debug(
            "error_handler_applied",
            method=request.method,
            url=str(request.url),
            result_type=type(result).__name__,
        )
        raise result

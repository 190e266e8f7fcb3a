"""High-level Habitica API client."""

from collections.abc import Awaitable, Mapping
from typing import Any

from .config import (
    DEFAULT_ENDPOINT,
    DEFAULT_PLATFORM,
    HABITICA_API_KEY,
    HABITICA_USER_ID,
    HTTP_DEFAULT_TIMEOUT,
)
from .connection import Connection, ErrorHandler
from .exceptions import HabiticaError
from .logging import get_logger
from .models import ConnectionConfig, RequestOptions

logger = get_logger("client")


def _user_credentials(result: Any) -> dict[str, str]:
    """Pull the user id and API token out of an auth response.

    Raises:
        HabiticaError: If the response has no usable ``data.id`` and ``data.apiToken``.
    """
    data = result.get("data") if isinstance(result, dict) else None
    if not isinstance(data, dict):
        raise HabiticaError("Unexpected auth response: missing user data")

    user_id = data.get("id") or data.get("_id")
    api_token = data.get("apiToken")
    if not (user_id and api_token):
        raise HabiticaError("Unexpected auth response: missing id or apiToken")

    return {"id": user_id, "apiToken": api_token}


class Habitica:
    """Async client for the Habitica API.

    Wraps a :class:`~habitica.connection.Connection` and adds account helpers
    that store the returned credentials on the connection.

    Example:
        api = Habitica(id="user-uuid", api_key="api-token")
        tasks = await api.get("/tasks/user")

        guest = Habitica()
        await guest.local_login("username", "password")
        user = await guest.get("/user")
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
        if not (id and api_key):
            logger.warning(
                "missing_credentials",
                detail="only content routes will be available",
            )

        self.connection = Connection(
            id=id,
            api_key=api_key,
            endpoint=endpoint,
            platform=platform,
            error_handler=error_handler,
            timeout=timeout,
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Habitica":
        """Create a client using HABITICA_USER_ID and HABITICA_API_KEY."""
        kwargs.setdefault("id", HABITICA_USER_ID)
        kwargs.setdefault("api_key", HABITICA_API_KEY)
        return cls(**kwargs)

    def configure(self, **options: Any) -> None:
        """Update connection settings. See :meth:`Connection.configure`."""
        self.connection.configure(**options)

    def get_config(self) -> ConnectionConfig:
        return self.connection.get_config()

    def get(
        self,
        route: str,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> Awaitable[Any]:
        return self.connection.get(route, options)

    def post(
        self,
        route: str,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> Awaitable[Any]:
        return self.connection.post(route, options)

    def put(
        self,
        route: str,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> Awaitable[Any]:
        return self.connection.put(route, options)

    def delete(
        self,
        route: str,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> Awaitable[Any]:
        return self.connection.delete(route, options)

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        confirm_password: str | None = None,
    ) -> Any:
        """Register a new local account and use its credentials.

        Args:
            username: Login name for the new account.
            email: Account email address.
            password: Account password.
            confirm_password: Password confirmation. Defaults to ``password``.

        Returns:
            The API response; the new user is under ``data``.

        Raises:
            ApiError: If the server rejects the registration.
            UnknownConnectionError: If the server could not be reached.
            HabiticaError: If the response does not carry the new credentials.
        """
        result = await self.connection.post(
            "/user/auth/local/register",
            {
                "send": {
                    "username": username,
                    "email": email,
                    "password": password,
                    "confirmPassword": confirm_password or password,
                }
            },
        )
        user = _user_credentials(result)
        self.connection.configure(id=user["id"], api_key=user["apiToken"])
        logger.info("registered", username=username)
        return result

    async def local_login(self, username: str, password: str) -> Any:
        """Log in with a username (or email) and password and use the returned credentials.

        Raises:
            ApiError: If the credentials are rejected.
            UnknownConnectionError: If the server could not be reached.
            HabiticaError: If the response does not carry the new credentials.
        """
        result = await self.connection.post(
            "/user/auth/local/login",
            {"send": {"username": username, "password": password}},
        )
        user = _user_credentials(result)
        self.connection.configure(id=user["id"], api_key=user["apiToken"])
        logger.info("logged_in", username=username)
        return result

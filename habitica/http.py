"""HTTP transport with integrated logging."""

import time
from typing import Any

import httpx

from .config import HTTP_DEFAULT_TIMEOUT
from .logging import get_logger

logger = get_logger("http")


class HTTPClient:
    """Async HTTP transport built on httpx.

    Requests are built eagerly with :meth:`build_request` and sent later with
    :meth:`send`, so whatever state went into the request is fixed at build
    time. Each send opens its own ``httpx.AsyncClient``; there is no pooling
    and no retry.

    Example:
        http = HTTPClient()
        request = http.build_request("GET", "https://habitica.com/api/v3/status")
        response = await http.send(request)
    """

    def __init__(self, timeout: float = HTTP_DEFAULT_TIMEOUT):
        """Initialize HTTP transport.

        Args:
            timeout: Request timeout in seconds.
        """
        self.timeout = timeout

    def build_request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        json_data: Any = None,
    ) -> httpx.Request:
        """Build a request without sending it.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Absolute URL.
            params: Query parameters.
            headers: Request headers.
            json_data: JSON body. ``None`` leaves the body empty.

        Returns:
            httpx.Request ready to be sent.
        """
        return httpx.Request(
            method,
            url,
            params=params,
            headers=headers,
            json=json_data,
            extensions={"timeout": httpx.Timeout(self.timeout).as_dict()},
        )

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request and return the response.

        Raises:
            httpx.HTTPStatusError: The server answered with a 4xx/5xx status.
            httpx.RequestError: The request failed before a response arrived.
        """
        method = request.method
        url = str(request.url)

        logger.debug("request_start", method=method, url=url)

        start_time = time.perf_counter()

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.send(request)
            except httpx.RequestError as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    "request_failed",
                    method=method,
                    url=url,
                    duration_ms=round(duration_ms, 2),
                    error=str(e),
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000

            logger.info(
                "request_complete",
                method=method,
                url=url,
                status=response.status_code,
                duration_ms=round(duration_ms, 2),
            )

            response.raise_for_status()
            return response

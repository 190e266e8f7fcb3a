"""Route classification for the Habitica API.

Most routes live under the versioned API prefix (``/api/v3``). A handful of
top-level routes (logout, data export, payment webhooks...) are served from
the root of the endpoint instead.

Only an exact first segment counts as top-level: ``/exports`` is versioned,
unlike a plain ``^/(logout|export|...)`` prefix match.
"""

import re

from .config import API_VERSION_PREFIX

TOP_LEVEL_ROUTES: tuple[str, ...] = (
    "logout",
    "export",
    "email",
    "qr-code",
    "amazon",
    "iap",
    "paypal",
    "stripe",
)

TOP_LEVEL_ROUTES_PATTERN = re.compile(
    r"^/(?:" + "|".join(re.escape(segment) for segment in TOP_LEVEL_ROUTES) + r")(?:[/?]|$)"
)


def normalize_endpoint(url: str) -> str:
    """Strip a single trailing slash from an endpoint URL.

    Examples:
        >>> normalize_endpoint("https://habitica.com/")
        'https://habitica.com'
        >>> normalize_endpoint("https://habitica.com")
        'https://habitica.com'
    """
    if url.endswith("/"):
        return url[:-1]
    return url


def normalize_route(route: str) -> str:
    """Make sure a route starts with a slash."""
    if not route.startswith("/"):
        return f"/{route}"
    return route


def is_top_level(route: str) -> bool:
    """Return True if the route bypasses the versioned API prefix.

    The first path segment must match one of ``TOP_LEVEL_ROUTES`` exactly
    (case-sensitive), so ``/export/history.csv`` matches but ``/exports``
    does not.
    """
    return TOP_LEVEL_ROUTES_PATTERN.match(route) is not None


def route_prefix(route: str) -> str:
    """Return the path prefix to put between the endpoint and the route."""
    return "" if is_top_level(route) else API_VERSION_PREFIX


def build_url(endpoint: str, route: str) -> str:
    """Build the full URL for a route on the given endpoint."""
    route = normalize_route(route)
    return f"{endpoint}{route_prefix(route)}{route}"

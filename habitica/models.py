"""Pydantic models for connection settings and request options."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RequestOptions(BaseModel):
    """Per-request options accepted by the verb methods."""

    query: dict[str, Any] | None = Field(
        default=None, description="Query string parameters"
    )
    send: Any = Field(default=None, description="JSON request body")

    model_config = ConfigDict(extra="forbid")


class ConnectionConfig(BaseModel):
    """Read-only snapshot of a connection's settings."""

    id: str | None = None
    api_key: str | None = None
    endpoint: str
    platform: str | None = None

    model_config = ConfigDict(frozen=True)

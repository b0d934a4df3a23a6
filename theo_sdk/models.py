"""
Theo SDK Data Models
"""

import os
from enum import Enum
from typing import Optional, Dict, Tuple
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import TheoError


class Verb(str, Enum):
    """HTTP methods the SDK issues"""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


def validate_endpoint(url: str) -> str:
    """
    Check that ``url`` is absolute (scheme and host present) with a valid port.

    Raises:
        ValueError: If the URL is not absolute or its port is out of range
    """
    parts = urlsplit(url or "")
    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise ValueError(f"Endpoint must be an absolute http(s) URL: {url!r}")
    try:
        parts.port
    except ValueError as e:
        raise ValueError(f"Endpoint has an invalid port: {url!r}") from e
    return url


class ClientConfig(BaseModel):
    """SDK client configuration"""

    url: str = Field(..., description="Absolute URL of the graph resource")
    username: Optional[str] = Field(None, description="Basic auth username")
    password: Optional[str] = Field(None, repr=False, description="Basic auth password")
    additional_headers: Optional[Dict[str, str]] = Field(
        None, description="Headers merged over the session defaults"
    )
    timeout_connect: float = Field(1.0, description="Connection timeout in seconds")
    timeout_read: float = Field(10.0, description="Read timeout in seconds")
    max_workers: int = Field(4, description="Threads performing network I/O")
    debug: bool = Field(False, description="Enable debug logging")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v):
        return validate_endpoint(v)

    @field_validator("timeout_connect", "timeout_read")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("Timeouts must be positive")
        return v

    @field_validator("max_workers")
    @classmethod
    def validate_max_workers(cls, v):
        if v < 1:
            raise ValueError("max_workers must be at least 1")
        return v

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        """
        Build configuration from environment variables.

        Supported variables:
        - THEO_URL: endpoint URL (required)
        - THEO_USERNAME / THEO_PASSWORD: Basic auth credential
        - THEO_TIMEOUT_CONNECT / THEO_TIMEOUT_READ: timeouts in seconds
        - THEO_DEBUG: "1", "true" or "yes" enables debug logging

        Keyword arguments override the environment.
        """
        values = {
            "url": os.getenv("THEO_URL", ""),
            "username": os.getenv("THEO_USERNAME") or None,
            "password": os.getenv("THEO_PASSWORD") or None,
            "debug": os.getenv("THEO_DEBUG", "").lower() in ("1", "true", "yes"),
        }
        if os.getenv("THEO_TIMEOUT_CONNECT"):
            values["timeout_connect"] = float(os.environ["THEO_TIMEOUT_CONNECT"])
        if os.getenv("THEO_TIMEOUT_READ"):
            values["timeout_read"] = float(os.environ["THEO_TIMEOUT_READ"])
        values.update(overrides)
        return cls(**values)


class OutgoingRequest(BaseModel):
    """A fully configured request. Never mutated; builders return copies."""

    model_config = ConfigDict(frozen=True)

    verb: Verb = Verb.GET
    url: str
    body: Optional[bytes] = None


class ResponseMetadata(BaseModel):
    """Status line and headers of a completed exchange"""

    model_config = ConfigDict(frozen=True)

    status_code: int
    url: str
    reason: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def unavailable(cls, url: str) -> "ResponseMetadata":
        """Metadata for an exchange that never produced a response."""
        return cls(status_code=0, url=url, reason="No response")

    def __str__(self) -> str:
        return (
            f"<ResponseMetadata url={self.url} status={self.status_code} "
            f"reason={self.reason!r} headers={self.headers}>"
        )


class RequestResult(BaseModel):
    """
    Outcome of one exchange.

    ``data`` is already filtered: it is None whenever the status code was not
    accepted, even if the server sent a body. ``errors`` holds the transport
    error (if any) followed by the derived status error (if any).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    data: Optional[bytes] = None
    response: ResponseMetadata
    accepted: bool
    errors: Tuple[TheoError, ...] = ()

    @property
    def ok(self) -> bool:
        return self.accepted and not self.errors

    @property
    def error(self) -> Optional[TheoError]:
        return self.errors[0] if self.errors else None

    @property
    def status_code(self) -> int:
        return self.response.status_code

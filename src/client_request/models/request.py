"""Request descriptor and response result models."""

from typing import Any

from pydantic import BaseModel, Field


class RequestDescriptor(BaseModel):
    """Normalized request parameters derived from a URL.

    Frozen once built. The ``headers`` dict is the descriptor's own copy of
    the caller's map and only ever gains ``Content-Length`` and
    ``Content-Type``.
    """

    hostname: str = Field(..., description="Host name without port, e.g. example.com")
    path: str = Field(..., description="URL path plus query string, e.g. /get?foo=bar")
    port: int = Field(..., description="Explicit URL port, or 443/80 by scheme")
    protocol: str = Field(..., description="URL scheme: http or https")
    method: str = Field(..., description="Upper-cased HTTP method")
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @property
    def is_secure(self) -> bool:
        """Whether the request goes over TLS."""
        return self.protocol == "https"


class ResponseResult(BaseModel):
    """Fully received and decoded response.

    Only created after the whole body has arrived and been decoded.
    """

    response: Any = Field(default=None, description="Decoded body: bytes, str, parsed value or None")
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Response headers with lower-cased names",
    )
    host: str
    method: str
    path: str
    protocol: str
    status_code: int = 0
    status_message: str = ""

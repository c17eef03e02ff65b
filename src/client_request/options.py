"""Request options builder.

Turns a URL string, header map and method into a RequestDescriptor.
Pure transformation, no network access.
"""

from collections.abc import Mapping

import httpx

from client_request.exceptions import InvalidUrlError
from client_request.models.request import RequestDescriptor

SUPPORTED_SCHEMES = ("http", "https")
DEFAULT_PORTS = {"https": 443, "http": 80}


def build_options(
    url: str,
    headers: Mapping[str, str] | None,
    method: str,
) -> RequestDescriptor:
    """Parse a URL into a request descriptor.

    Args:
        url: Absolute http(s) URL.
        headers: Caller headers. Copied, never mutated; non-string values
            are stringified.
        method: HTTP method.

    Returns:
        RequestDescriptor owning its own header map.

    Raises:
        InvalidUrlError: If the URL cannot be parsed, lacks a host, or uses
            an unsupported scheme.
    """
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidUrlError(str(url), str(e)) from e

    scheme = parsed.scheme.lower()
    if scheme not in SUPPORTED_SCHEMES:
        raise InvalidUrlError(url, f"unsupported scheme {parsed.scheme!r}")
    if not parsed.host:
        raise InvalidUrlError(url, "missing host")

    # httpx drops the port when it equals the scheme default
    port = parsed.port if parsed.port is not None else DEFAULT_PORTS[scheme]

    return RequestDescriptor(
        hostname=parsed.host,
        path=parsed.raw_path.decode("ascii") or "/",
        port=port,
        protocol=scheme,
        method=method.upper(),
        headers={name: _header_value(value) for name, value in (headers or {}).items()},
    )


def descriptor_url(descriptor: RequestDescriptor) -> str:
    """Rebuild the absolute URL a descriptor points at."""
    host = descriptor.hostname
    if ":" in host:
        host = f"[{host}]"
    return f"{descriptor.protocol}://{host}:{descriptor.port}{descriptor.path}"


def _header_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

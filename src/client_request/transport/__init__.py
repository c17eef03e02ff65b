"""Transport package."""

from client_request.transport.dispatcher import parse_timeout, send_request

__all__ = [
    "send_request",
    "parse_timeout",
]

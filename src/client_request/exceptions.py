"""Custom exceptions for client-request.

Provides a structured exception hierarchy for the ways a request can fail.
"""


class ClientRequestError(Exception):
    """Base exception class for all client-request errors."""

    pass


class InvalidUrlError(ClientRequestError):
    """Raised when a URL cannot be turned into a request descriptor.

    Attributes:
        url: The URL string that was rejected.
    """

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Invalid URL {url!r}: {message}")


class TransportError(ClientRequestError):
    """Raised on connection-level failures (refused, reset, DNS, TLS).

    The underlying httpx error is available as ``__cause__``.

    Attributes:
        url: The request URL.
    """

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Request to {url} failed: {message}")


class RequestTimedOutError(ClientRequestError):
    """Raised when the Request-Timeout deadline fires and the request is aborted.

    Attributes:
        url: The request URL.
        timeout: The armed timeout in seconds.
    """

    def __init__(self, url: str, timeout: float | None):
        self.url = url
        self.timeout = timeout
        if timeout is None:
            super().__init__(f"Request to {url} timed out")
        else:
            super().__init__(f"Request to {url} timed out after {timeout}s")


class MissingContentTypeError(ClientRequestError):
    """Raised when a response arrives without a Content-Type header.

    Attributes:
        url: The request URL.
        status_code: Status code of the response.
    """

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Content-Type header is missing (HTTP {status_code} from {url})")


class BodyDecodeError(ClientRequestError):
    """Raised when a response body cannot be decoded under its content type.

    Attributes:
        content_type: The declared Content-Type value.
    """

    def __init__(self, content_type: str, message: str):
        self.content_type = content_type
        super().__init__(f"Failed to decode {content_type} body: {message}")

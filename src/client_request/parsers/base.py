"""Abstract body decoder interface using Protocol."""

from typing import Any, Protocol


class BodyDecoder(Protocol):
    """Response body decoder abstraction protocol.

    Any callable taking raw bytes and a Content-Type value qualifies, so plain
    functions such as ``decode_body`` satisfy it.
    """

    def __call__(self, raw: bytes, content_type: str) -> Any:
        """Decode a response body.

        Args:
            raw: The complete response body.
            content_type: The response Content-Type header value.

        Returns:
            bytes, str, or a parsed structured value.

        Raises:
            BodyDecodeError: When the body cannot be interpreted.
        """
        ...

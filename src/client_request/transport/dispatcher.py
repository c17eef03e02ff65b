"""Transport dispatcher.

Sends one request described by a RequestDescriptor over httpx, drains the
response, and materializes a decoded ResponseResult.
"""

import re
from collections.abc import Mapping

import httpx

from client_request.config.settings import settings
from client_request.exceptions import (
    BodyDecodeError,
    MissingContentTypeError,
    RequestTimedOutError,
    TransportError,
)
from client_request.models.request import RequestDescriptor, ResponseResult
from client_request.options import descriptor_url
from client_request.parsers.base import BodyDecoder
from client_request.parsers.body_parser import decode_body
from client_request.utils.logger import get_logger

# Describe the wire body, not the decompressed one handed to the decoder
TRANSFER_HEADERS = ("content-encoding", "content-length")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_timeout(headers: Mapping[str, str], header_name: str | None = None) -> int | None:
    """Read the request timeout in seconds from the header map.

    Only the leading integer of the value counts ("3", " 3", "3s" all give 3).
    Missing, unparseable and non-positive values arm no timeout.
    """
    header_name = (header_name or settings.timeout_header).lower()
    for name, value in headers.items():
        if name.lower() != header_name or not isinstance(value, str):
            continue
        match = _LEADING_INT.match(value)
        if match is None:
            return None
        seconds = int(match.group(1))
        return seconds if seconds > 0 else None
    return None


async def send_request(
    descriptor: RequestDescriptor,
    payload: bytes | str | None = None,
    *,
    decoder: BodyDecoder | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ResponseResult:
    """Send a request and return its fully decoded response.

    Args:
        descriptor: Normalized request parameters.
        payload: Encoded body, written before the request is ended.
        decoder: Body decoder; defaults to ``decode_body``.
        transport: Optional httpx transport (e.g. httpx.MockTransport).

    Returns:
        ResponseResult built after the whole body has arrived.

    Raises:
        RequestTimedOutError: When the connection stays idle longer than the
            Request-Timeout value.
        TransportError: On connection-level failures.
        MissingContentTypeError: When the response has no Content-Type.
        BodyDecodeError: When the decoder rejects the body.
    """
    url = descriptor_url(descriptor)
    timeout = parse_timeout(descriptor.headers)
    log = get_logger(__name__).bind(
        method=descriptor.method,
        host=descriptor.hostname,
        path=descriptor.path,
        protocol=descriptor.protocol,
    )

    log.debug("Request dispatched", timeout=timeout)
    try:
        response, raw = await _exchange(descriptor, url, payload, timeout, transport)
    except httpx.TimeoutException as e:
        log.warning("Request timed out", error=str(e))
        raise RequestTimedOutError(url, timeout) from e
    except httpx.RequestError as e:
        log.error("Request failed", error=str(e) or type(e).__name__)
        raise TransportError(url, str(e) or type(e).__name__) from e

    status_code = response.status_code or 0
    log = log.bind(status_code=status_code, size=len(raw))
    log.debug("Response received")

    content_type = response.headers.get("content-type")
    if not content_type:
        log.error("Content-Type header is missing")
        raise MissingContentTypeError(url, status_code)

    body = _decode(decoder or decode_body, raw, content_type, log)

    log.info("Request completed")
    return ResponseResult(
        response=body,
        headers=_result_headers(response.headers),
        host=descriptor.hostname,
        method=descriptor.method,
        path=descriptor.path,
        protocol=descriptor.protocol,
        status_code=status_code,
        status_message=response.reason_phrase or "",
    )


async def _exchange(
    descriptor: RequestDescriptor,
    url: str,
    payload: bytes | str | None,
    timeout: int | None,
    transport: httpx.AsyncBaseTransport | None,
) -> tuple[httpx.Response, bytes]:
    """Perform the wire exchange and drain the body in arrival order.

    An armed timeout applies to each connect, write and read, so it fires
    only when the connection goes idle. Leaving the client context closes
    the aborted connection.
    """
    client_headers = {"User-Agent": settings.user_agent} if settings.user_agent else None

    async with httpx.AsyncClient(
        transport=transport,
        headers=client_headers,
        verify=settings.verify_tls,
        follow_redirects=settings.follow_redirects,
        timeout=httpx.Timeout(timeout) if timeout else None,
    ) as client:
        async with client.stream(
            descriptor.method,
            url,
            headers=descriptor.headers,
            content=payload,
        ) as response:
            chunks: list[bytes] = []
            async for chunk in response.aiter_bytes():
                chunks.append(chunk)

    return response, b"".join(chunks)


def _decode(decoder: BodyDecoder, raw: bytes, content_type: str, log) -> object:
    log.debug("Decoding body", content_type=content_type)
    try:
        return decoder(raw, content_type)
    except BodyDecodeError as e:
        log.error("Body decode failed", error=str(e))
        raise
    except Exception as e:
        log.error("Body decode failed", error=str(e))
        raise BodyDecodeError(content_type, str(e)) from e


def _result_headers(headers: httpx.Headers) -> dict[str, str]:
    """Lower-cased response headers, minus transfer headers httpx already undid."""
    result = dict(headers)
    if result.get("content-encoding", "identity").strip().lower() != "identity":
        for name in TRANSFER_HEADERS:
            result.pop(name, None)
    return result

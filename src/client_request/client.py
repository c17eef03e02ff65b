"""Public request operations.

Each coroutine builds a descriptor, encodes the body where there is one,
and awaits a single dispatch. A call either returns a complete
ResponseResult or raises a ClientRequestError subclass.
"""

from collections.abc import Mapping
from typing import Any

import httpx

from client_request.encoders.body import classify_body, encode_body, prepare_headers
from client_request.models.body import FormBody, JsonBody, RequestBody
from client_request.models.request import ResponseResult
from client_request.options import build_options
from client_request.parsers.base import BodyDecoder
from client_request.transport.dispatcher import send_request

RequestHeaders = Mapping[str, str]


async def request_head(
    url: str,
    headers: RequestHeaders | None = None,
    *,
    decoder: BodyDecoder | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ResponseResult:
    """Send a HEAD request."""
    options = build_options(url, headers, "HEAD")
    return await send_request(options, None, decoder=decoder, transport=transport)


async def request_get(
    url: str,
    headers: RequestHeaders | None = None,
    *,
    decoder: BodyDecoder | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ResponseResult:
    """Send a GET request."""
    options = build_options(url, headers, "GET")
    return await send_request(options, None, decoder=decoder, transport=transport)


async def request_post(
    url: str,
    data: Any = None,
    headers: RequestHeaders | None = None,
    *,
    decoder: BodyDecoder | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ResponseResult:
    """Send a POST request.

    ``data`` may be None, bytes, a dict/list/model (sent as JSON), or text.
    """
    return await _send_with_body(
        "POST", url, classify_body(data), headers, decoder=decoder, transport=transport
    )


async def request_put(
    url: str,
    data: Any = None,
    headers: RequestHeaders | None = None,
    *,
    decoder: BodyDecoder | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ResponseResult:
    """Send a PUT request. Body rules are the same as for POST."""
    return await _send_with_body(
        "PUT", url, classify_body(data), headers, decoder=decoder, transport=transport
    )


async def request_json(
    url: str,
    data: Any,
    headers: RequestHeaders | None = None,
    *,
    decoder: BodyDecoder | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ResponseResult:
    """Send a POST request with ``data`` serialized as JSON, whatever its shape."""
    return await _send_with_body(
        "POST", url, JsonBody(data), headers, decoder=decoder, transport=transport
    )


async def request_form(
    url: str,
    form_data: Mapping[str, Any],
    headers: RequestHeaders | None = None,
    *,
    decoder: BodyDecoder | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ResponseResult:
    """Send a POST request with ``form_data`` as application/x-www-form-urlencoded."""
    return await _send_with_body(
        "POST", url, FormBody(form_data), headers, decoder=decoder, transport=transport
    )


async def _send_with_body(
    method: str,
    url: str,
    body: RequestBody,
    headers: RequestHeaders | None,
    *,
    decoder: BodyDecoder | None,
    transport: httpx.AsyncBaseTransport | None,
) -> ResponseResult:
    options = build_options(url, headers, method)
    encoded = encode_body(body)
    prepare_headers(options.headers, encoded)
    return await send_request(options, encoded.payload, decoder=decoder, transport=transport)

"""Minimal async HTTP(S) client helper.

Builds a request from a URL, headers and an optional body, sends it with
httpx, and returns the response with its body decoded by Content-Type.
"""

from client_request.client import (
    request_form,
    request_get,
    request_head,
    request_json,
    request_post,
    request_put,
)
from client_request.exceptions import (
    BodyDecodeError,
    ClientRequestError,
    InvalidUrlError,
    MissingContentTypeError,
    RequestTimedOutError,
    TransportError,
)
from client_request.models.request import RequestDescriptor, ResponseResult

__all__ = [
    "request_head",
    "request_get",
    "request_post",
    "request_put",
    "request_json",
    "request_form",
    "RequestDescriptor",
    "ResponseResult",
    "ClientRequestError",
    "InvalidUrlError",
    "TransportError",
    "RequestTimedOutError",
    "MissingContentTypeError",
    "BodyDecodeError",
]

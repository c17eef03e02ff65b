"""Models package."""

from client_request.models.body import (
    EncodedBody,
    FormBody,
    JsonBody,
    NoBody,
    RawBody,
    RequestBody,
    TextBody,
)
from client_request.models.request import RequestDescriptor, ResponseResult

__all__ = [
    "RequestDescriptor",
    "ResponseResult",
    "RequestBody",
    "NoBody",
    "RawBody",
    "TextBody",
    "JsonBody",
    "FormBody",
    "EncodedBody",
]

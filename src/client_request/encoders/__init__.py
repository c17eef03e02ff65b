"""Encoders package."""

from client_request.encoders.body import classify_body, encode_body, prepare_headers

__all__ = [
    "classify_body",
    "encode_body",
    "prepare_headers",
]

"""Parsers package."""

from client_request.parsers.base import BodyDecoder
from client_request.parsers.body_parser import decode_body, parse_content_type

__all__ = [
    "BodyDecoder",
    "decode_body",
    "parse_content_type",
]

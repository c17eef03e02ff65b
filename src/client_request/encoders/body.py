"""Request body encoding.

Classifies caller data into a RequestBody variant and encodes it into a
wire payload with a default content type.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel
from pydantic_core import to_json

from client_request.models.body import (
    EncodedBody,
    FormBody,
    JsonBody,
    NoBody,
    RawBody,
    RequestBody,
    TextBody,
)

OCTET_STREAM = "application/octet-stream"
JSON_UTF8 = "application/json;charset=utf-8"
TEXT_UTF8 = "text/plain;charset=utf-8"
FORM_URLENCODED = "application/x-www-form-urlencoded"

# Characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def classify_body(data: Any) -> RequestBody:
    """Decide the body variant for POST/PUT data.

    Absent data and an empty string are both NoBody.
    """
    if data is None or data == "":
        return NoBody()
    if isinstance(data, (bytes, bytearray, memoryview)):
        return RawBody(bytes(data))
    if isinstance(data, (dict, list, tuple, BaseModel)):
        return JsonBody(data)
    if isinstance(data, str):
        return TextBody(data)
    return TextBody(_stringify(data))


def encode_body(body: RequestBody) -> EncodedBody:
    """Encode a body variant into its payload and default content type."""
    if isinstance(body, NoBody):
        return EncodedBody(payload=None)
    if isinstance(body, RawBody):
        return EncodedBody(payload=body.data, content_type=OCTET_STREAM)
    if isinstance(body, TextBody):
        return EncodedBody(payload=body.text, content_type=TEXT_UTF8)
    if isinstance(body, JsonBody):
        return EncodedBody(payload=_to_json(body.value), content_type=JSON_UTF8)
    if isinstance(body, FormBody):
        return EncodedBody(payload=_to_form(body.fields), content_type=FORM_URLENCODED)
    raise TypeError(f"Unsupported body variant: {type(body).__name__}")


def prepare_headers(headers: MutableMapping[str, str], encoded: EncodedBody) -> None:
    """Set Content-Length and default Content-Type on a header map in place.

    A caller-supplied Content-Type is kept. Content-Length always reflects
    the payload, replacing any caller value whatever its casing.
    """
    for name in [key for key in headers if key.lower() == "content-length"]:
        del headers[name]
    headers["Content-Length"] = str(encoded.content_length)

    if encoded.content_type and not _has_header(headers, "content-type"):
        for name in [key for key in headers if key.lower() == "content-type"]:
            del headers[name]
        headers["Content-Type"] = encoded.content_type


def _has_header(headers: Mapping[str, str], name: str) -> bool:
    return any(key.lower() == name and value for key, value in headers.items())


def _to_json(value: Any) -> str:
    # Compact, non-ASCII kept; models, datetimes and UUIDs use their JSON form
    return to_json(value).decode("utf-8")


def _to_form(fields: Mapping[str, Any]) -> str:
    return "&".join(
        f"{_encode_component(str(key))}={_encode_component(_stringify(value))}"
        for key, value in fields.items()
    )


def _encode_component(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def _stringify(value: Any) -> str:
    """Render a scalar the way it reads on the wire (true/false/null, a,b)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else _stringify(item) for item in value)
    return str(value)

"""Default response body decoder.

Picks a representation from the MIME type: JSON and form bodies are parsed,
textual types become ``str``, everything else stays ``bytes``.
"""

import json
from typing import Any
from urllib.parse import parse_qsl

from client_request.exceptions import BodyDecodeError

FORM_TYPE = "application/x-www-form-urlencoded"

TEXT_TYPES = frozenset(
    {
        "application/xml",
        "application/javascript",
        "application/ecmascript",
    }
)


def parse_content_type(content_type: str) -> tuple[str, dict[str, str]]:
    """Split a Content-Type value into its MIME type and parameters.

    Example: 'text/html; charset=ISO-8859-1' -> ('text/html', {'charset': 'ISO-8859-1'})
    """
    mime, _, rest = content_type.partition(";")
    params: dict[str, str] = {}
    for part in rest.split(";"):
        name, sep, value = part.partition("=")
        if sep:
            params[name.strip().lower()] = value.strip().strip('"')
    return mime.strip().lower(), params


def decode_body(raw: bytes, content_type: str) -> Any:
    """Decode a response body according to its Content-Type.

    Args:
        raw: The complete response body.
        content_type: The response Content-Type header value.

    Returns:
        Parsed JSON value (None for an empty body), dict for form bodies,
        str for textual types, or the raw bytes.

    Raises:
        BodyDecodeError: When the charset is unknown or the JSON is invalid.
    """
    mime, params = parse_content_type(content_type)
    charset = params.get("charset", "utf-8")

    try:
        if mime == "application/json" or mime.endswith("+json"):
            if not raw.strip():
                return None
            return json.loads(raw.decode(charset))

        if mime == FORM_TYPE:
            pairs = parse_qsl(raw.decode(charset), keep_blank_values=True)
            return dict(pairs)

        if mime.startswith("text/") or mime in TEXT_TYPES or mime.endswith("+xml"):
            return raw.decode(charset, errors="replace")

    except (ValueError, LookupError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
        raise BodyDecodeError(content_type, str(e)) from e

    return raw

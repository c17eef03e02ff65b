"""Request body variants and the encoded payload.

``RequestBody`` is a closed union: the shape of caller data is decided once
at the call boundary and the encoder only dispatches on the variant.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class NoBody:
    """No payload. Also used for an explicitly empty string."""


@dataclass(frozen=True)
class RawBody:
    """Opaque bytes sent unchanged."""

    data: bytes


@dataclass(frozen=True)
class TextBody:
    """Plain text sent unchanged."""

    text: str


@dataclass(frozen=True)
class JsonBody:
    """Any JSON-serializable value."""

    value: Any


@dataclass(frozen=True)
class FormBody:
    """Flat key/value map sent as application/x-www-form-urlencoded."""

    fields: Mapping[str, Any] = field(default_factory=dict)


RequestBody = Union[NoBody, RawBody, TextBody, JsonBody, FormBody]


@dataclass(frozen=True)
class EncodedBody:
    """Wire payload plus its default content type.

    ``content_type`` is empty when the mode forces no type.
    """

    payload: bytes | str | None
    content_type: str = ""

    @property
    def content_length(self) -> int:
        """Exact byte length of the payload on the wire."""
        if self.payload is None:
            return 0
        if isinstance(self.payload, str):
            return len(self.payload.encode("utf-8"))
        return len(self.payload)

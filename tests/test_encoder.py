"""Tests for request body classification and encoding."""

from datetime import datetime
from uuid import UUID

import pytest
from pydantic import BaseModel

from client_request.encoders.body import (
    FORM_URLENCODED,
    JSON_UTF8,
    OCTET_STREAM,
    TEXT_UTF8,
    classify_body,
    encode_body,
    prepare_headers,
)
from client_request.models.body import (
    EncodedBody,
    FormBody,
    JsonBody,
    NoBody,
    RawBody,
    TextBody,
)


class Point(BaseModel):
    x: int
    y: int


class TestClassifyBody:
    @pytest.mark.parametrize("data", [None, ""])
    def test_absent_and_empty_are_no_body(self, data):
        assert classify_body(data) == NoBody()

    def test_bytes(self):
        assert classify_body(b"foo") == RawBody(b"foo")
        assert classify_body(bytearray(b"foo")) == RawBody(b"foo")

    def test_structured_values_are_json(self):
        assert isinstance(classify_body({"a": 1}), JsonBody)
        assert isinstance(classify_body([1, 2]), JsonBody)
        assert isinstance(classify_body(Point(x=1, y=2)), JsonBody)

    def test_text(self):
        assert classify_body("hello") == TextBody("hello")

    @pytest.mark.parametrize("data, text", [(42, "42"), (1.5, "1.5"), (True, "true")])
    def test_other_scalars_become_text(self, data, text):
        assert classify_body(data) == TextBody(text)


class TestEncodeBody:
    def test_no_body(self):
        encoded = encode_body(NoBody())
        assert encoded.payload is None
        assert encoded.content_type == ""
        assert encoded.content_length == 0

    def test_raw_bytes_unchanged(self):
        encoded = encode_body(RawBody(bytes([0x66, 0x6F, 0x6F])))
        assert encoded.payload == b"foo"
        assert encoded.content_type == OCTET_STREAM
        assert encoded.content_length == 3

    def test_text_length_is_utf8_bytes(self):
        encoded = encode_body(TextBody("héllo"))
        assert encoded.payload == "héllo"
        assert encoded.content_type == TEXT_UTF8
        assert encoded.content_length == 6

    def test_json_is_compact(self):
        value = {"number": 42, "text": "foo", "list": [1, 2], "object": {"bar": "baz"}}
        encoded = encode_body(JsonBody(value))
        assert encoded.payload == '{"number":42,"text":"foo","list":[1,2],"object":{"bar":"baz"}}'
        assert encoded.content_type == JSON_UTF8

    def test_json_keeps_non_ascii(self):
        encoded = encode_body(JsonBody({"name": "Zoë"}))
        assert encoded.payload == '{"name":"Zoë"}'
        assert encoded.content_length == len('{"name":"Zoë"}'.encode("utf-8"))

    def test_json_serializes_models(self):
        assert encode_body(JsonBody(Point(x=1, y=2))).payload == '{"x":1,"y":2}'
        assert encode_body(JsonBody([Point(x=3, y=4)])).payload == '[{"x":3,"y":4}]'

    def test_json_serializes_datetimes_and_uuids(self):
        value = {
            "at": datetime(2024, 1, 2, 3, 4, 5),
            "id": UUID("12345678-1234-5678-1234-567812345678"),
        }
        encoded = encode_body(JsonBody(value))
        assert encoded.payload == (
            '{"at":"2024-01-02T03:04:05","id":"12345678-1234-5678-1234-567812345678"}'
        )

    def test_json_mode_serializes_any_shape(self):
        assert encode_body(JsonBody(None)).payload == "null"
        assert encode_body(JsonBody("foo")).payload == '"foo"'
        assert encode_body(JsonBody(42)).payload == "42"

    def test_form(self):
        encoded = encode_body(FormBody({"number": 42, "text": "foo"}))
        assert encoded.payload in ("number=42&text=foo", "text=foo&number=42")
        assert encoded.content_type.startswith(FORM_URLENCODED)

    def test_form_percent_encodes_keys_and_values(self):
        encoded = encode_body(FormBody({"a b": "x&y=z/ü"}))
        assert encoded.payload == "a%20b=x%26y%3Dz%2F%C3%BC"

    def test_form_keeps_uri_component_safe_characters(self):
        assert encode_body(FormBody({"k": "-_.!~*'()"})).payload == "k=-_.!~*'()"

    def test_form_value_rendering(self):
        assert encode_body(FormBody({"flag": True})).payload == "flag=true"
        assert encode_body(FormBody({"none": None})).payload == "none=null"
        assert encode_body(FormBody({"list": [1, 2]})).payload == "list=1%2C2"

    def test_idempotent(self):
        body = FormBody({"number": 42, "text": "foo"})
        headers_a: dict[str, str] = {}
        headers_b: dict[str, str] = {}

        first = encode_body(body)
        second = encode_body(body)
        prepare_headers(headers_a, first)
        prepare_headers(headers_b, second)

        assert first == second
        assert headers_a == headers_b

    def test_unknown_variant(self):
        with pytest.raises(TypeError):
            encode_body("not a body")


class TestPrepareHeaders:
    def test_no_payload_sets_zero_length_only(self):
        headers: dict[str, str] = {}
        prepare_headers(headers, EncodedBody(payload=None))
        assert headers == {"Content-Length": "0"}

    def test_sets_defaults(self):
        headers = {"Client": "request-service"}
        prepare_headers(headers, EncodedBody(payload=b"foo", content_type=OCTET_STREAM))
        assert headers == {
            "Client": "request-service",
            "Content-Length": "3",
            "Content-Type": OCTET_STREAM,
        }

    @pytest.mark.parametrize("name", ["Content-Type", "content-type", "CONTENT-TYPE"])
    def test_caller_content_type_wins(self, name):
        headers = {name: "application/vnd.custom"}
        prepare_headers(headers, EncodedBody(payload="{}", content_type=JSON_UTF8))
        assert headers[name] == "application/vnd.custom"
        assert "Content-Type" not in headers or name == "Content-Type"

    def test_empty_caller_content_type_is_replaced(self):
        headers = {"content-type": ""}
        prepare_headers(headers, EncodedBody(payload="x", content_type=TEXT_UTF8))
        assert headers == {"Content-Length": "1", "Content-Type": TEXT_UTF8}

    def test_content_length_is_always_recomputed(self):
        headers = {"content-length": "999", "Content-Length": "12"}
        prepare_headers(headers, EncodedBody(payload="héllo", content_type=TEXT_UTF8))
        assert headers["Content-Length"] == "6"
        assert "content-length" not in headers

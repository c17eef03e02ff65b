"""Test configuration and fixtures."""

import json

import httpx
import pytest
import structlog


@pytest.fixture
def captured_requests():
    """Requests seen by the mock transports, in order."""
    return []


@pytest.fixture
def echo_transport(captured_requests):
    """Transport that echoes the request body back under the request's Content-Type."""

    def handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        content_type = request.headers.get("content-type", "text/plain;charset=utf-8")
        return httpx.Response(200, headers={"Content-Type": content_type}, content=request.content)

    return httpx.MockTransport(handler)


@pytest.fixture
def httpbin_transport(captured_requests):
    """Transport answering like httpbin's /get and /post endpoints."""

    def handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        body = request.content
        content_type = request.headers.get("content-type", "")
        payload = {
            "args": dict(request.url.params),
            "headers": dict(request.headers),
            "data": body.decode("utf-8", errors="replace"),
            "json": None,
            "form": {},
        }
        if content_type.startswith("application/json"):
            payload["json"] = json.loads(body)
        elif content_type.startswith("application/x-www-form-urlencoded"):
            payload["form"] = dict(httpx.QueryParams(body.decode("ascii")))
        return httpx.Response(200, json=payload)

    return httpx.MockTransport(handler)


@pytest.fixture
def respond_with(captured_requests):
    """Factory for a transport that always returns the given response."""

    def factory(status_code: int = 200, headers: dict | None = None, content: bytes = b""):
        def handler(request: httpx.Request) -> httpx.Response:
            captured_requests.append(request)
            return httpx.Response(status_code, headers=headers or {}, content=content)

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def reset_logging():
    """Restore structlog defaults after a test reconfigures it."""
    yield
    structlog.reset_defaults()

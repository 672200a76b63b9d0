"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from wdclient.session import SessionHandle
from wdclient.transport import HTTPTransport

SESSION_ID = "sess-123"
SERVER_URL = "http://remote.test"


@dataclass
class RecordedRequest:
    """A request as seen by the fake remote end."""

    method: str
    path: str
    body: Any
    headers: httpx.Headers
    content: bytes


Responder = Callable[[RecordedRequest], httpx.Response]


@dataclass
class RecordingRemote:
    """httpx.MockTransport handler with canned replies and a request log.

    Replies are keyed by (method, path suffix); unmatched requests get
    `{"value": null}` with status 200.
    """

    requests: list[RecordedRequest] = field(default_factory=list)
    replies: dict[tuple[str, str], Responder] = field(default_factory=dict)
    delays: dict[str, float] = field(default_factory=dict)

    def reply(
        self,
        method: str,
        suffix: str,
        status_code: int = 200,
        json_body: Any = None,
        content: bytes | None = None,
    ) -> None:
        """Register a fixed reply."""

        def respond(_: RecordedRequest) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json_body)

        self.replies[(method, suffix)] = respond

    def respond_with(self, method: str, suffix: str, responder: Responder) -> None:
        """Register a reply computed from the request."""
        self.replies[(method, suffix)] = responder

    def fail_with(self, method: str, suffix: str, exc: Exception) -> None:
        """Make matching requests raise `exc` instead of replying."""

        def respond(_: RecordedRequest) -> httpx.Response:
            raise exc

        self.replies[(method, suffix)] = respond

    def clear(self) -> None:
        self.requests.clear()

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        recorded = RecordedRequest(
            method=request.method,
            path=request.url.path,
            body=body,
            headers=request.headers,
            content=request.content,
        )
        self.requests.append(recorded)

        # Per-text delays let concurrency tests control completion order
        if isinstance(body, dict) and body.get("text") in self.delays:
            await asyncio.sleep(self.delays[body["text"]])

        for (method, suffix), responder in self.replies.items():
            if request.method == method and request.url.path.endswith(suffix):
                return responder(recorded)
        return httpx.Response(200, json={"value": None})


@pytest.fixture
def no_such_alert() -> dict[str, Any]:
    """Body of a W3C "no such alert" error response."""
    return {
        "value": {
            "error": "no such alert",
            "message": "No user prompt is currently open",
            "stacktrace": "",
        }
    }


@pytest.fixture
def remote() -> RecordingRemote:
    """Fake remote end for a single test."""
    return RecordingRemote()


@pytest.fixture
def http_client(remote: RecordingRemote) -> httpx.AsyncClient:
    """httpx client routed to the fake remote end."""
    return httpx.AsyncClient(transport=httpx.MockTransport(remote))


@pytest.fixture
def transport(http_client: httpx.AsyncClient) -> HTTPTransport:
    return HTTPTransport(SERVER_URL, client=http_client)


@pytest.fixture
def handle(transport: HTTPTransport) -> SessionHandle:
    """SessionHandle wired to the fake remote end."""
    return SessionHandle(SESSION_ID, transport)

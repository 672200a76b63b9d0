"""Fake WebDriver remote end for integration tests.

A small Starlette app that implements the W3C user prompt endpoints against
an in-memory browser model. Handles reach it through httpx.ASGITransport,
so the full request/response path runs without a network.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx
import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from wdclient.session import SessionHandle
from wdclient.transport import HTTPTransport

REMOTE_URL = "http://webdriver.test"


@dataclass
class UserPrompt:
    """An open alert, confirm or prompt dialog."""

    kind: str
    text: str
    typed: str | None = None


@dataclass
class FakeBrowser:
    """In-memory state of the sessions served by the fake remote end."""

    prompts: dict[str, UserPrompt | None] = field(default_factory=dict)
    closed: list[tuple[str, str, str | None]] = field(default_factory=list)

    def new_session(self, session_id: str) -> None:
        self.prompts[session_id] = None

    def open_prompt(self, session_id: str, kind: str, text: str) -> None:
        self.prompts[session_id] = UserPrompt(kind=kind, text=text)


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        {"value": {"error": error, "message": message, "stacktrace": ""}},
        status_code=status_code,
    )


def create_remote_end(browser: FakeBrowser) -> Starlette:
    """Build the ASGI app serving `browser`."""

    def lookup(request: Request) -> tuple[str, UserPrompt | None, JSONResponse | None]:
        session_id = request.path_params["session_id"]
        if session_id not in browser.prompts:
            return session_id, None, _error(404, "invalid session id", f"No session {session_id}")
        prompt = browser.prompts[session_id]
        if prompt is None:
            return session_id, None, _error(404, "no such alert", "No user prompt is currently open")
        return session_id, prompt, None

    async def get_alert_text(request: Request) -> JSONResponse:
        _, prompt, error = lookup(request)
        if error:
            return error
        return JSONResponse({"value": prompt.text})

    async def send_alert_text(request: Request) -> JSONResponse:
        _, prompt, error = lookup(request)
        if error:
            return error
        body = await request.json()
        if not isinstance(body, dict) or not isinstance(body.get("text"), str):
            return _error(400, "invalid argument", "text must be a string")
        if prompt.kind != "prompt":
            return _error(400, "element not interactable", f"Cannot type into {prompt.kind}")
        prompt.typed = body["text"]
        return JSONResponse({"value": None})

    def close_prompt(outcome: str):
        async def endpoint(request: Request) -> JSONResponse:
            session_id, prompt, error = lookup(request)
            if error:
                return error
            await request.json()
            browser.closed.append((session_id, outcome, prompt.typed))
            browser.prompts[session_id] = None
            return JSONResponse({"value": None})

        return endpoint

    return Starlette(
        routes=[
            Route("/session/{session_id}/alert/text", get_alert_text, methods=["GET"]),
            Route("/session/{session_id}/alert/text", send_alert_text, methods=["POST"]),
            Route("/session/{session_id}/alert/accept", close_prompt("accepted"), methods=["POST"]),
            Route("/session/{session_id}/alert/dismiss", close_prompt("dismissed"), methods=["POST"]),
        ]
    )


@pytest.fixture
def browser() -> FakeBrowser:
    fake = FakeBrowser()
    fake.new_session("s-1")
    return fake


@pytest.fixture
def remote_client(browser: FakeBrowser) -> httpx.AsyncClient:
    app = create_remote_end(browser)
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app))


@pytest.fixture
def session(remote_client: httpx.AsyncClient) -> SessionHandle:
    """Handle for session "s-1" on the fake remote end."""
    return SessionHandle("s-1", HTTPTransport(REMOTE_URL, client=remote_client))

"""Wire encoder: Command -> HTTP request descriptor.

Endpoints follow the W3C WebDriver "User prompts" section:

    GET  /session/{id}/alert/text      Get Alert Text
    POST /session/{id}/alert/dismiss   Dismiss Alert
    POST /session/{id}/alert/accept    Accept Alert
    POST /session/{id}/alert/text      Send Alert Text
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, assert_never
from urllib.parse import quote

from ..errors import UnsupportedCommandError
from .commands import (
    COMMAND_TYPES,
    AcceptAlert,
    Command,
    DismissAlert,
    GetAlertText,
    SendAlertText,
)


@dataclass(frozen=True)
class RequestDescriptor:
    """Method, path and JSON body of one protocol request."""

    method: str
    path: str
    body: dict[str, Any] | None = None

    def content(self) -> bytes | None:
        """Serialized body. Same body, same bytes."""
        if self.body is None:
            return None
        return json.dumps(
            self.body,
            ensure_ascii=False,
            separators=(",", ":"),
            sort_keys=True,
        ).encode("utf-8")


def session_path(session_id: str, *segments: str) -> str:
    """Path under /session/{id}, with the id URL-quoted."""
    path = f"/session/{quote(session_id, safe='')}"
    if segments:
        path = f"{path}/{'/'.join(segments)}"
    return path


def encode(command: Command, session_id: str) -> RequestDescriptor:
    """Map a command to the request the remote end expects.

    Raises:
        UnsupportedCommandError: If `command` is not a known command variant
    """
    if not isinstance(command, COMMAND_TYPES):
        raise UnsupportedCommandError(f"Cannot encode {type(command).__name__}: not a command")

    match command:
        case GetAlertText():
            return RequestDescriptor("GET", session_path(session_id, "alert", "text"))
        case DismissAlert():
            return RequestDescriptor("POST", session_path(session_id, "alert", "dismiss"), {})
        case AcceptAlert():
            return RequestDescriptor("POST", session_path(session_id, "alert", "accept"), {})
        case SendAlertText(text=text):
            return RequestDescriptor(
                "POST",
                session_path(session_id, "alert", "text"),
                {"text": text.render()},
            )
        case _:
            assert_never(command)

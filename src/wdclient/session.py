"""Session handle: the single dispatch point for WebDriver commands.

Every typed operation builds a Command and goes through `SessionHandle.cmd`,
which encodes it, performs the HTTP exchange and decodes the reply:

    handle = SessionHandle.connect("http://localhost:4444", session_id)
    await handle.send_alert_text("selenium")
    await handle.accept_alert()

A handle never changes after construction. Any number of coroutines and
facade objects can share one; commands issued concurrently are independent
exchanges, so callers that need ordering must await each call in turn.
"""

from __future__ import annotations

import logging
from typing import Any

from .alert import Alert
from .config import WebDriverConfig
from .protocol.commands import (
    AcceptAlert,
    Command,
    DismissAlert,
    GetAlertText,
    SendAlertText,
)
from .protocol.encoder import encode
from .protocol.keys import TypingInput
from .protocol.response import CmdResponse, decode_response
from .transport import HTTPTransport, Transport

logger = logging.getLogger(__name__)


class SessionHandle:
    """Shared handle to one remote WebDriver session."""

    __slots__ = ("_session_id", "_transport", "_config", "_owns_transport")

    def __init__(
        self,
        session_id: str,
        transport: Transport,
        *,
        owns_transport: bool = False,
    ):
        if not session_id:
            raise ValueError("session_id must not be empty")
        self._session_id = session_id
        self._transport = transport
        self._config = getattr(transport, "config", None) or WebDriverConfig()
        self._owns_transport = owns_transport

    @classmethod
    def connect(
        cls,
        server_url: str,
        session_id: str,
        config: WebDriverConfig | None = None,
    ) -> SessionHandle:
        """Create a handle for an existing session on `server_url`.

        The handle owns its HTTP transport; close it with `aclose()` or use
        it as an async context manager.
        """
        transport = HTTPTransport(server_url, config=config)
        return cls(session_id, transport, owns_transport=True)

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def server_url(self) -> str:
        return self._transport.base_url

    @property
    def config(self) -> WebDriverConfig:
        """Settings of the transport in use (defaults if it carries none)."""
        return self._config

    async def cmd(self, command: Command) -> CmdResponse:
        """Send a command and return the decoded response.

        Raises:
            UnsupportedCommandError: If `command` cannot be encoded
            TransportError: If the HTTP exchange fails
            ProtocolError: If the remote end reports a WebDriver error
        """
        request = encode(command, self._session_id)
        logger.debug(f"Sending {command.cmd}: {request.method} {request.path}")
        raw = await self._transport.execute(request)
        response = decode_response(raw)
        logger.debug(f"Received {command.cmd} response (HTTP {raw.status_code})")
        return response

    # Alerts

    async def get_alert_text(self) -> str:
        """Get the text of the active alert.

        Raises:
            NoSuchAlertError: If no alert is open
            DecodeError: If the remote end returns something other than a string
        """
        response = await self.cmd(GetAlertText())
        return response.value_as(str)

    async def dismiss_alert(self) -> None:
        """Dismiss the active alert."""
        await self.cmd(DismissAlert())

    async def accept_alert(self) -> None:
        """Accept the active alert."""
        await self.cmd(AcceptAlert())

    async def send_alert_text(self, keys: TypingInput) -> None:
        """Type into the active prompt.

        Accepts plain text, a Key, or a combination:

            await handle.send_alert_text("selenium")
            await handle.send_alert_text(Key.CONTROL + "a")
        """
        await self.cmd(SendAlertText(text=keys))

    def switch_to(self) -> SwitchTo:
        """Entry point for switching context (currently the active alert)."""
        return SwitchTo(self)

    async def aclose(self) -> None:
        """Close the transport if this handle created it."""
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> SessionHandle:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"SessionHandle(session_id={self._session_id!r}, server_url={self.server_url!r})"


class SwitchTo:
    """Context switching operations."""

    def __init__(self, handle: SessionHandle):
        self.handle = handle

    def alert(self) -> Alert:
        """Facade for the active alert."""
        return Alert(self.handle)

"""wdclient - async WebDriver command dispatch.

A SessionHandle sends typed commands to a remote W3C WebDriver session over
HTTP and decodes the replies into typed results or typed errors:

    async with SessionHandle.connect("http://localhost:4444", session_id) as handle:
        text = await handle.get_alert_text()
        await handle.send_alert_text(Key.CONTROL + "a")
        await handle.accept_alert()
"""

from .alert import Alert
from .config import WebDriverConfig
from .errors import (
    DecodeError,
    NoSuchAlertError,
    ProtocolError,
    TransportError,
    UnexpectedAlertOpenError,
    UnsupportedCommandError,
    WebDriverError,
)
from .protocol import (
    AcceptAlert,
    CmdResponse,
    Command,
    DismissAlert,
    GetAlertText,
    Key,
    SendAlertText,
    TypingData,
)
from .session import SessionHandle, SwitchTo
from .transport import HTTPTransport, Transport

__version__ = "0.1.0"

__all__ = [
    # Session
    "SessionHandle",
    "SwitchTo",
    "Alert",
    "WebDriverConfig",
    # Transport
    "Transport",
    "HTTPTransport",
    # Commands
    "Command",
    "GetAlertText",
    "DismissAlert",
    "AcceptAlert",
    "SendAlertText",
    "CmdResponse",
    # Input
    "Key",
    "TypingData",
    # Errors
    "WebDriverError",
    "TransportError",
    "ProtocolError",
    "DecodeError",
    "UnsupportedCommandError",
    "NoSuchAlertError",
    "UnexpectedAlertOpenError",
]

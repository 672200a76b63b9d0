"""WebDriver wire protocol: commands, key input, encoding and decoding."""

from .commands import (
    COMMAND_TYPES,
    AcceptAlert,
    AnyCommand,
    Command,
    DismissAlert,
    GetAlertText,
    SendAlertText,
)
from .encoder import RequestDescriptor, encode, session_path
from .keys import Key, TypingData, TypingInput
from .response import CmdResponse, RawResponse, decode_response

__all__ = [
    # Commands
    "Command",
    "AnyCommand",
    "COMMAND_TYPES",
    "GetAlertText",
    "DismissAlert",
    "AcceptAlert",
    "SendAlertText",
    # Keys
    "Key",
    "TypingData",
    "TypingInput",
    # Encoding / decoding
    "RequestDescriptor",
    "encode",
    "session_path",
    "RawResponse",
    "CmdResponse",
    "decode_response",
]

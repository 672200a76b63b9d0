"""Legacy alert API.

Kept for code written against `driver.switch_to().alert()`. Each method
forwards to the matching SessionHandle operation, unchanged, after
emitting a DeprecationWarning.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .protocol.keys import TypingInput
    from .session import SessionHandle


def _deprecated(old: str, new: str) -> None:
    warnings.warn(
        f"Alert.{old}() is deprecated, use SessionHandle.{new}() instead",
        DeprecationWarning,
        stacklevel=3,
    )


class Alert:
    """Deprecated facade over the alert operations of a SessionHandle."""

    def __init__(self, handle: SessionHandle):
        self.handle = handle

    async def text(self) -> str:
        """Get the text of the active alert."""
        _deprecated("text", "get_alert_text")
        return await self.handle.get_alert_text()

    async def dismiss(self) -> None:
        """Dismiss the active alert."""
        _deprecated("dismiss", "dismiss_alert")
        await self.handle.dismiss_alert()

    async def accept(self) -> None:
        """Accept the active alert."""
        _deprecated("accept", "accept_alert")
        await self.handle.accept_alert()

    async def send_keys(self, keys: TypingInput) -> None:
        """Send text to the active alert."""
        _deprecated("send_keys", "send_alert_text")
        await self.handle.send_alert_text(keys)

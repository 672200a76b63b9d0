"""Error types raised by the command pipeline.

Three families, one per stage that can fail:
- TransportError: the HTTP exchange itself failed (unreachable, timeout,
  reset, or a reply that is not a WebDriver response at all)
- ProtocolError: the remote end answered with a WebDriver error object;
  one subclass per W3C error code
- DecodeError: the reply was well formed but its value does not have the
  shape the operation expects
"""

from __future__ import annotations

from typing import Any, ClassVar


class WebDriverError(Exception):
    """Base class for every error raised by wdclient."""


class TransportError(WebDriverError):
    """The request/response exchange with the remote end failed."""


class UnsupportedCommandError(WebDriverError):
    """The encoder was given something that is not a known command."""


class DecodeError(WebDriverError):
    """Response value does not match the expected type."""

    def __init__(self, expected: str, actual: Any, detail: str | None = None):
        self.expected = expected
        self.actual = actual
        self.detail = detail
        message = f"Expected {expected} in response value, got {describe_json(actual)}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.expected, self.actual, self.detail))


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def describe_json(value: Any) -> str:
    """Short description of a decoded JSON value for error messages."""
    if value is MISSING:
        return "no 'value' field"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return f"boolean {value!r}"
    if isinstance(value, int | float):
        return f"number {value!r}"
    if isinstance(value, str):
        return f"string {value!r}"
    if isinstance(value, list):
        return f"array of {len(value)} items"
    if isinstance(value, dict):
        return f"object with keys {sorted(value)}"
    return repr(value)


class ProtocolError(WebDriverError):
    """The remote end reported a WebDriver error.

    The error code, message and stacktrace are kept exactly as sent so
    callers can match on `error` (e.g. "no such alert").
    """

    code: ClassVar[str | None] = None
    _registry: ClassVar[dict[str, type[ProtocolError]]] = {}

    def __init__(
        self,
        error: str,
        message: str = "",
        status_code: int | None = None,
        stacktrace: str | None = None,
        data: Any = None,
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        self.stacktrace = stacktrace
        self.data = data
        text = f"{error}: {message}" if message else error
        if status_code is not None:
            text = f"{text} (HTTP {status_code})"
        super().__init__(text)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.code:
            ProtocolError._registry[cls.code] = cls

    @staticmethod
    def is_error_value(value: Any) -> bool:
        """Check whether a response `value` is a WebDriver error object."""
        return isinstance(value, dict) and isinstance(value.get("error"), str)

    @classmethod
    def from_payload(cls, status_code: int | None, value: dict[str, Any]) -> ProtocolError:
        """Build the most specific error for a WebDriver error object."""
        error = value["error"]
        error_cls = cls._registry.get(error, ProtocolError)
        message = value.get("message")
        stacktrace = value.get("stacktrace")
        return error_cls(
            error,
            message if isinstance(message, str) else "",
            status_code=status_code,
            stacktrace=stacktrace if isinstance(stacktrace, str) else None,
            data=value.get("data"),
        )


class DetachedShadowRootError(ProtocolError):
    code = "detached shadow root"


class ElementClickInterceptedError(ProtocolError):
    code = "element click intercepted"


class ElementNotInteractableError(ProtocolError):
    code = "element not interactable"


class InsecureCertificateError(ProtocolError):
    code = "insecure certificate"


class InvalidArgumentError(ProtocolError):
    code = "invalid argument"


class InvalidCookieDomainError(ProtocolError):
    code = "invalid cookie domain"


class InvalidElementStateError(ProtocolError):
    code = "invalid element state"


class InvalidSelectorError(ProtocolError):
    code = "invalid selector"


class InvalidSessionIdError(ProtocolError):
    code = "invalid session id"


class JavascriptError(ProtocolError):
    code = "javascript error"


class MoveTargetOutOfBoundsError(ProtocolError):
    code = "move target out of bounds"


class NoSuchAlertError(ProtocolError):
    code = "no such alert"


class NoSuchCookieError(ProtocolError):
    code = "no such cookie"


class NoSuchElementError(ProtocolError):
    code = "no such element"


class NoSuchFrameError(ProtocolError):
    code = "no such frame"


class NoSuchShadowRootError(ProtocolError):
    code = "no such shadow root"


class NoSuchWindowError(ProtocolError):
    code = "no such window"


class ScriptTimeoutError(ProtocolError):
    code = "script timeout"


class SessionNotCreatedError(ProtocolError):
    code = "session not created"


class StaleElementReferenceError(ProtocolError):
    code = "stale element reference"


class WebDriverTimeoutError(ProtocolError):
    code = "timeout"


class UnableToCaptureScreenError(ProtocolError):
    code = "unable to capture screen"


class UnableToSetCookieError(ProtocolError):
    code = "unable to set cookie"


class UnexpectedAlertOpenError(ProtocolError):
    """An alert blocked the command. `data` may carry the alert text."""

    code = "unexpected alert open"


class UnknownCommandError(ProtocolError):
    code = "unknown command"


class UnknownError(ProtocolError):
    code = "unknown error"


class UnknownMethodError(ProtocolError):
    code = "unknown method"


class UnsupportedOperationError(ProtocolError):
    code = "unsupported operation"

"""Response decoding.

Every WebDriver response is a JSON object with a `value` key. The decoder
parses the raw body once and hands out the value converted to whatever type
the calling operation expects.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..errors import MISSING, DecodeError, ProtocolError, TransportError

T = TypeVar("T")


@dataclass(frozen=True)
class RawResponse:
    """Status code and undecoded body of one HTTP exchange."""

    status_code: int
    body: bytes


@lru_cache(maxsize=64)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


class CmdResponse:
    """Decoded response of a single command."""

    def __init__(self, status_code: int, body: dict[str, Any]):
        self.status_code = status_code
        self.body = body

    @property
    def value(self) -> Any:
        """Raw `value` field, or None when absent."""
        return self.body.get("value")

    def value_as(self, tp: type[T]) -> T:
        """Convert `value` to `tp` using strict validation.

        No coercion happens: a number is not a string and null is only
        accepted when `tp` allows None.

        Raises:
            DecodeError: If `value` is missing or does not match `tp`
        """
        if "value" not in self.body:
            raise DecodeError(_type_name(tp), MISSING)
        value = self.body["value"]
        try:
            return _adapter(tp).validate_python(value, strict=True)
        except ValidationError as e:
            first = e.errors()[0]["msg"] if e.errors() else None
            raise DecodeError(_type_name(tp), value, detail=first) from e

    def __repr__(self) -> str:
        return f"CmdResponse(status_code={self.status_code}, value={self.value!r})"


def decode_response(raw: RawResponse) -> CmdResponse:
    """Parse a successful HTTP reply into a CmdResponse.

    Raises:
        TransportError: If the body is not a JSON object
        ProtocolError: If the body carries a WebDriver error despite a 2xx status
    """
    try:
        body = json.loads(raw.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise TransportError(f"Malformed response (HTTP {raw.status_code}): body is not JSON") from e

    if not isinstance(body, dict):
        raise TransportError(
            f"Malformed response (HTTP {raw.status_code}): expected a JSON object, "
            f"got {type(body).__name__}"
        )

    value = body.get("value")
    if ProtocolError.is_error_value(value):
        raise ProtocolError.from_payload(raw.status_code, value)

    return CmdResponse(raw.status_code, body)

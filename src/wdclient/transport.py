"""HTTP transport to the remote end.

One call to `execute` is one HTTP exchange. There are no retries, no
caching and no batching here; concurrent calls each get their own request
on the shared connection pool of the underlying httpx client.

Failure mapping:
- connection refused, reset, timeouts        -> TransportError
- non-2xx with a WebDriver error object       -> ProtocolError subclass
- non-2xx with anything else                  -> TransportError
"""

from __future__ import annotations

import contextlib
import json
import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from .config import WebDriverConfig
from .errors import ProtocolError, TransportError
from .protocol.encoder import RequestDescriptor
from .protocol.response import RawResponse

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Anything able to perform a WebDriver request/response exchange."""

    @property
    def base_url(self) -> str:
        """Remote end URL that request paths are appended to."""
        ...

    async def execute(self, request: RequestDescriptor) -> RawResponse:
        """Send one request and return the successful reply.

        Raises:
            TransportError: If the exchange fails or the reply is malformed
            ProtocolError: If the remote end answers with a WebDriver error
        """
        ...

    async def aclose(self) -> None:
        """Release connections owned by this transport."""
        ...


class HTTPTransport:
    """Transport over httpx.

    Pass an existing `httpx.AsyncClient` to share its connection pool (or to
    plug in `httpx.MockTransport` / `httpx.ASGITransport`); a client passed
    in is never closed by this transport.
    """

    def __init__(
        self,
        base_url: str,
        config: WebDriverConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self.config = config or WebDriverConfig()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.request_timeout, connect=self.config.connect_timeout),
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def _headers(self, request: RequestDescriptor) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }
        if request.body is not None:
            headers["Content-Type"] = "application/json; charset=utf-8"
        return headers

    async def execute(self, request: RequestDescriptor) -> RawResponse:
        """Perform the exchange described by `request`."""
        url = f"{self._base_url}{request.path}"
        try:
            response = await self._client.request(
                request.method,
                url,
                content=request.content(),
                headers=self._headers(request),
            )
        except httpx.TimeoutException as e:
            raise TransportError(f"{request.method} {url} timed out: {e}") from e
        except httpx.TransportError as e:
            raise TransportError(f"{request.method} {url} failed: {e}") from e

        if response.is_success:
            return RawResponse(response.status_code, response.content)

        logger.warning(f"{request.method} {request.path} returned HTTP {response.status_code}")
        raise self._error_from_response(request, response)

    def _error_from_response(
        self, request: RequestDescriptor, response: httpx.Response
    ) -> ProtocolError | TransportError:
        payload: Any = None
        with contextlib.suppress(json.JSONDecodeError, UnicodeDecodeError):
            payload = json.loads(response.content)

        value = payload.get("value") if isinstance(payload, dict) else None
        if ProtocolError.is_error_value(value):
            return ProtocolError.from_payload(response.status_code, value)

        snippet = response.content[:200].decode("utf-8", errors="replace")
        return TransportError(
            f"{request.method} {request.path} returned HTTP {response.status_code} "
            f"without a WebDriver error: {snippet!r}"
        )

    async def aclose(self) -> None:
        """Close the httpx client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HTTPTransport:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

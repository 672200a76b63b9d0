"""Client configuration.

Values can be set in code or read from the environment:

    WDCLIENT_REQUEST_TIMEOUT   seconds to wait for a full response (default 120)
    WDCLIENT_CONNECT_TIMEOUT   seconds to wait for the TCP connection (default 10)
    WDCLIENT_USER_AGENT        User-Agent header sent with every request
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_USER_AGENT = "wdclient/0.1.0"


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class WebDriverConfig:
    """Settings shared by every request of a session."""

    # Page loads and script execution can hold a request open for a long time
    request_timeout: float = 120.0
    connect_timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> WebDriverConfig:
        """Build a config from WDCLIENT_* environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            request_timeout=_env_float(env, "WDCLIENT_REQUEST_TIMEOUT", cls.request_timeout),
            connect_timeout=_env_float(env, "WDCLIENT_CONNECT_TIMEOUT", cls.connect_timeout),
            user_agent=env.get("WDCLIENT_USER_AGENT") or DEFAULT_USER_AGENT,
        )

"""wdclient CLI.

Drive the alert of an already running WebDriver session.

Usage:
    wdclient --session ID alert text              # Print the alert text
    wdclient --session ID alert text --format json
    wdclient --session ID alert accept            # Accept the alert
    wdclient --session ID alert dismiss           # Dismiss the alert
    wdclient --session ID alert send "selenium"   # Type into a prompt
    wdclient --session ID alert send "" --press ENTER

The remote end defaults to http://localhost:4444; set --url or WDCLIENT_URL.
The session id can also come from WDCLIENT_SESSION.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import TypeVar

import click

from .config import WebDriverConfig
from .errors import WebDriverError
from .protocol.keys import Key, TypingData
from .session import SessionHandle

T = TypeVar("T")

# Output format options
FORMAT_TABLE = "table"
FORMAT_JSON = "json"


def _connect(url: str, session_id: str, config: WebDriverConfig) -> SessionHandle:
    return SessionHandle.connect(url, session_id, config=config)


def _run(ctx: click.Context, operation: Callable[[SessionHandle], Awaitable[T]]) -> T:
    """Open the session from the CLI options, run one operation, close it."""
    url: str = ctx.obj["url"]
    session_id: str | None = ctx.obj["session_id"]
    if not session_id:
        raise click.UsageError("No session id: pass --session or set WDCLIENT_SESSION")

    try:
        config = WebDriverConfig.from_env()
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    async def run() -> T:
        async with _connect(url, session_id, config) as handle:
            return await operation(handle)

    try:
        return asyncio.run(run())
    except WebDriverError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option(
    "--url",
    envvar="WDCLIENT_URL",
    default="http://localhost:4444",
    show_default=True,
    help="WebDriver remote end URL",
)
@click.option("--session", "session_id", envvar="WDCLIENT_SESSION", help="Session id to act on")
@click.option("--verbose", "-v", is_flag=True, help="Log every request to stderr")
@click.pass_context
def main(ctx: click.Context, url: str, session_id: str | None, verbose: bool) -> None:
    """Send WebDriver commands to an existing session."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = {"url": url, "session_id": session_id}


@main.group()
def alert() -> None:
    """Work with the active alert."""


@alert.command("text")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice([FORMAT_TABLE, FORMAT_JSON]),
    default=FORMAT_TABLE,
    help="Output format",
)
@click.pass_context
def alert_text(ctx: click.Context, output_format: str) -> None:
    """Print the text of the active alert."""
    text = _run(ctx, lambda handle: handle.get_alert_text())

    if output_format == FORMAT_JSON:
        click.echo(json.dumps({"text": text}, ensure_ascii=False))
        return
    click.echo(text)


@alert.command("accept")
@click.pass_context
def alert_accept(ctx: click.Context) -> None:
    """Accept the active alert."""
    _run(ctx, lambda handle: handle.accept_alert())


@alert.command("dismiss")
@click.pass_context
def alert_dismiss(ctx: click.Context) -> None:
    """Dismiss the active alert."""
    _run(ctx, lambda handle: handle.dismiss_alert())


@alert.command("send")
@click.argument("text")
@click.option(
    "--press",
    "keys",
    multiple=True,
    type=click.Choice(list(Key.__members__), case_sensitive=False),
    help="Key to press after the text (repeatable), e.g. --press ENTER",
)
@click.pass_context
def alert_send(ctx: click.Context, text: str, keys: tuple[str, ...]) -> None:
    """Type TEXT into the active prompt.

    Examples:

        wdclient --session abc alert send "selenium"

        wdclient --session abc alert send "" --press ENTER
    """
    payload = TypingData.from_text(text)
    for name in keys:
        payload = payload + Key[name.upper()]
    _run(ctx, lambda handle: handle.send_alert_text(payload))


if __name__ == "__main__":
    main()

"""Command definitions for the WebDriver protocol layer.

Each command is a small frozen model tagged by its `cmd` literal. The set is
closed: `Command` is the union of all variants, and the encoder matches every
one of them. Adding an operation means adding a variant here and a case in
`encoder.encode`.
"""

from __future__ import annotations

from typing import Annotated, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator

from .keys import TypingData, TypingUnit


class _CommandModel(BaseModel):
    model_config = ConfigDict(frozen=True)


def _dump_units(text: TypingData) -> list[TypingUnit]:
    return list(text.units)


class GetAlertText(_CommandModel):
    """Read the text of the active user prompt."""

    cmd: Literal["get_alert_text"] = "get_alert_text"


class DismissAlert(_CommandModel):
    """Dismiss the active user prompt."""

    cmd: Literal["dismiss_alert"] = "dismiss_alert"


class AcceptAlert(_CommandModel):
    """Accept the active user prompt."""

    cmd: Literal["accept_alert"] = "accept_alert"


class SendAlertText(_CommandModel):
    """Type into the active prompt.

    `text` accepts anything TypingData.coerce does (str, Key, sequences)
    and is stored as TypingData. It dumps to its list of units, which
    validates back to the same command.
    """

    cmd: Literal["send_alert_text"] = "send_alert_text"
    text: Annotated[
        TypingData,
        PlainValidator(TypingData.coerce),
        PlainSerializer(_dump_units, return_type=list[TypingUnit]),
    ]


AnyCommand = GetAlertText | DismissAlert | AcceptAlert | SendAlertText

Command = Annotated[AnyCommand, Field(discriminator="cmd")]

COMMAND_TYPES: tuple[type[BaseModel], ...] = get_args(AnyCommand)

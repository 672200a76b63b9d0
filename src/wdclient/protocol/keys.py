"""Keyboard input for WebDriver text entry.

The remote end receives typed text as a plain string. Special keys are sent
as code points from the Unicode private use area, following the W3C
WebDriver key table ("Keyboard actions", normalised key values).

TypingData keeps literal characters and keys apart until the moment the
payload is rendered, so text coming from a user is never reinterpreted as a
key press.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum


class Key(Enum):
    """Special keys and their W3C code points."""

    NULL = "\ue000"
    CANCEL = "\ue001"
    HELP = "\ue002"
    BACKSPACE = "\ue003"
    TAB = "\ue004"
    CLEAR = "\ue005"
    RETURN = "\ue006"
    ENTER = "\ue007"
    SHIFT = "\ue008"
    CONTROL = "\ue009"
    ALT = "\ue00a"
    PAUSE = "\ue00b"
    ESCAPE = "\ue00c"
    SPACE = "\ue00d"
    PAGE_UP = "\ue00e"
    PAGE_DOWN = "\ue00f"
    END = "\ue010"
    HOME = "\ue011"
    LEFT = "\ue012"
    UP = "\ue013"
    RIGHT = "\ue014"
    DOWN = "\ue015"
    INSERT = "\ue016"
    DELETE = "\ue017"
    SEMICOLON = "\ue018"
    EQUALS = "\ue019"

    # Numpad
    NUMPAD0 = "\ue01a"
    NUMPAD1 = "\ue01b"
    NUMPAD2 = "\ue01c"
    NUMPAD3 = "\ue01d"
    NUMPAD4 = "\ue01e"
    NUMPAD5 = "\ue01f"
    NUMPAD6 = "\ue020"
    NUMPAD7 = "\ue021"
    NUMPAD8 = "\ue022"
    NUMPAD9 = "\ue023"
    MULTIPLY = "\ue024"
    ADD = "\ue025"
    SEPARATOR = "\ue026"
    SUBTRACT = "\ue027"
    DECIMAL = "\ue028"
    DIVIDE = "\ue029"

    # Function keys
    F1 = "\ue031"
    F2 = "\ue032"
    F3 = "\ue033"
    F4 = "\ue034"
    F5 = "\ue035"
    F6 = "\ue036"
    F7 = "\ue037"
    F8 = "\ue038"
    F9 = "\ue039"
    F10 = "\ue03a"
    F11 = "\ue03b"
    F12 = "\ue03c"

    META = "\ue03d"
    ZENKAKU_HANKAKU = "\ue040"

    # Right-hand modifiers and numpad navigation
    RIGHT_SHIFT = "\ue050"
    RIGHT_CONTROL = "\ue051"
    RIGHT_ALT = "\ue052"
    RIGHT_META = "\ue053"
    NUMPAD_PAGE_UP = "\ue054"
    NUMPAD_PAGE_DOWN = "\ue055"
    NUMPAD_END = "\ue056"
    NUMPAD_HOME = "\ue057"
    NUMPAD_LEFT = "\ue058"
    NUMPAD_UP = "\ue059"
    NUMPAD_RIGHT = "\ue05a"
    NUMPAD_DOWN = "\ue05b"
    NUMPAD_INSERT = "\ue05c"
    NUMPAD_DELETE = "\ue05d"

    # Aliases
    COMMAND = "\ue03d"
    LEFT_SHIFT = "\ue008"
    LEFT_CONTROL = "\ue009"
    LEFT_ALT = "\ue00a"

    def __add__(self, other: TypingInput) -> TypingData:
        return TypingData.coerce(self) + other

    def __radd__(self, other: TypingInput) -> TypingData:
        return TypingData.coerce(other) + self


TypingUnit = str | Key


@dataclass(frozen=True)
class TypingData:
    """Ordered sequence of literal characters and special keys.

    Build it from plain text, a Key, or by adding pieces together:

        TypingData.from_text("hello")
        Key.CONTROL + "a"
        "name" + Key.TAB + "secret" + Key.ENTER
    """

    units: tuple[TypingUnit, ...] = ()

    def __post_init__(self) -> None:
        for unit in self.units:
            if isinstance(unit, Key):
                continue
            if not isinstance(unit, str) or len(unit) != 1:
                raise TypeError(f"TypingData units must be single characters or Key, got {unit!r}")

    @classmethod
    def from_text(cls, text: str) -> TypingData:
        """Literal text. Every character is kept as-is."""
        return cls(tuple(text))

    @classmethod
    def coerce(cls, value: TypingInput) -> TypingData:
        """Build TypingData from any supported input, preserving order."""
        if isinstance(value, TypingData):
            return value
        if isinstance(value, str):
            return cls.from_text(value)
        if isinstance(value, Key):
            return cls((value,))
        if isinstance(value, Iterable) and not isinstance(value, (Mapping, bytes, bytearray)):
            units: list[TypingUnit] = []
            for item in value:
                if isinstance(item, TypingData):
                    units.extend(item.units)
                elif isinstance(item, Key):
                    units.append(item)
                elif isinstance(item, str):
                    units.extend(item)
                else:
                    raise TypeError(f"Cannot type {type(item).__name__}: {item!r}")
            return cls(tuple(units))
        raise TypeError(f"Cannot convert {type(value).__name__} to TypingData")

    def render(self) -> str:
        """String sent to the remote end, keys expanded to their code points."""
        return "".join(unit.value if isinstance(unit, Key) else unit for unit in self.units)

    def __add__(self, other: TypingInput) -> TypingData:
        return TypingData(self.units + TypingData.coerce(other).units)

    def __radd__(self, other: TypingInput) -> TypingData:
        return TypingData(TypingData.coerce(other).units + self.units)

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[TypingUnit]:
        return iter(self.units)

    def __str__(self) -> str:
        return self.render()


TypingInput = TypingData | str | Key | Iterable[TypingData | str | Key]

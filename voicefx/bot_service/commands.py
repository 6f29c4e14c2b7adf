"""Classification of incoming text and callback payloads."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

COMMAND_START = "/start"
COMMAND_PRESET = "/preset"
COMMAND_CHANGE_PRESET = "/presetchange"
COMMAND_HELP = "/help"
COMMAND_CANCEL = "/cancel"


class CommandKind(str, Enum):
    """Every update maps to exactly one of these."""

    START = "start"
    LIST_PRESETS = "list_presets"
    CHANGE_PRESET = "change_preset"
    HELP = "help"
    CANCEL = "cancel"
    VOICE = "voice"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    argument: str = ""


# order matters: "/preset" must not shadow anything listed before it
_TEXT_COMMANDS = (
    (COMMAND_START, CommandKind.START),
    (COMMAND_PRESET, CommandKind.LIST_PRESETS),
    (COMMAND_HELP, CommandKind.HELP),
)


def classify_text(text: str | None) -> Command:
    """Prefix-match ``text`` against the chat commands, first match wins."""

    text = text or ""
    for prefix, kind in _TEXT_COMMANDS:
        if text.startswith(prefix):
            return Command(kind)
    return Command(CommandKind.UNRECOGNIZED, text)


def classify_callback(data: str | None) -> Command:
    """Classify the payload of an inline keyboard button."""

    data = data or ""
    if data.startswith(COMMAND_CHANGE_PRESET):
        return Command(CommandKind.CHANGE_PRESET, data[len(COMMAND_CHANGE_PRESET):].strip())
    if data.startswith(COMMAND_CANCEL):
        return Command(CommandKind.CANCEL)
    return Command(CommandKind.UNRECOGNIZED, data)


def change_preset_payload(preset: str) -> str:
    return f"{COMMAND_CHANGE_PRESET} {preset}"

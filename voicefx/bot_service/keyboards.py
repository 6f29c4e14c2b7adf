"""Reply and inline keyboards."""

from __future__ import annotations

from typing import Iterable

from aiogram.types import (
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    KeyboardButton,
    ReplyKeyboardMarkup,
)

from voicefx.bot_service.commands import COMMAND_CANCEL, COMMAND_HELP, COMMAND_PRESET, change_preset_payload
from voicefx.bot_service.texts import MESSAGE_CANCEL

MAIN_KEYBOARD = ReplyKeyboardMarkup(
    keyboard=[
        [KeyboardButton(text=COMMAND_PRESET), KeyboardButton(text=COMMAND_HELP)],
    ],
    resize_keyboard=True,
)


def preset_keyboard(preset_names: Iterable[str]) -> InlineKeyboardMarkup:
    """One row per preset, sorted by name, followed by a cancel row."""

    rows = [
        [InlineKeyboardButton(text=name, callback_data=change_preset_payload(name))]
        for name in sorted(preset_names)
    ]
    rows.append([InlineKeyboardButton(text=MESSAGE_CANCEL, callback_data=COMMAND_CANCEL)])
    return InlineKeyboardMarkup(inline_keyboard=rows)

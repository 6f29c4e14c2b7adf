"""High-level dispatch logic for the voice effects bot."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from aiogram.types import InlineKeyboardMarkup, ReplyKeyboardMarkup

from voicefx.bot_service import texts
from voicefx.bot_service.commands import Command, CommandKind, classify_text
from voicefx.bot_service.keyboards import MAIN_KEYBOARD, preset_keyboard
from voicefx.config.settings import Settings
from voicefx.converter import SoxConverter
from voicefx.storage import Session, SessionStore

logger = logging.getLogger(__name__)

ReplyMarkup = Union[ReplyKeyboardMarkup, InlineKeyboardMarkup]


class SessionMissingError(LookupError):
    """Raised when an allowed identity has no session record."""


@dataclass(slots=True)
class TextReply:
    """Text answer plus the keyboard attached to it."""

    text: str
    reply_markup: ReplyMarkup = field(default_factory=lambda: MAIN_KEYBOARD)


@dataclass(slots=True)
class VoiceResult:
    """Converted voice note ready to be sent back."""

    audio: bytes
    caption: str


class VoiceBotLogic:
    """Decides what to answer for each update and runs conversions."""

    def __init__(self, settings: Settings, sessions: SessionStore, converter: SoxConverter) -> None:
        self._settings = settings
        self._sessions = sessions
        self._converter = converter

    def reply_for_text(self, text: str | None) -> TextReply:
        """Build the answer to a plain text message."""

        command = classify_text(text)
        if command.kind is CommandKind.START:
            return TextReply(texts.MESSAGE_DEFAULT)
        if command.kind is CommandKind.LIST_PRESETS:
            if not self._settings.presets:
                return TextReply(texts.MESSAGE_NO_PRESET)
            return TextReply(texts.MESSAGE_SELECT_PRESET, preset_keyboard(self._settings.presets))
        if command.kind is CommandKind.HELP:
            return TextReply(texts.HELP_TEXT)
        return TextReply(f"{texts.MESSAGE_UNKNOWN_COMMAND}: {command.argument}")

    async def handle_callback(self, user_id: str, command: Command) -> str | None:
        """Apply an inline button press and return the acknowledgement text.

        ``None`` means the payload was not understood and nothing should be answered.
        """

        if command.kind is CommandKind.CHANGE_PRESET:
            preset = command.argument
            if preset not in self._settings.presets:
                return f"{texts.MESSAGE_NO_MATCHING_PRESET}: {preset}"
            await self._sessions.select_preset(user_id, preset)
            logger.info("User %s selected preset %s", user_id, preset)
            return f"{texts.MESSAGE_PRESET_CHANGED}: {preset}"
        if command.kind is CommandKind.CANCEL:
            return texts.MESSAGE_CANCELED
        logger.warning("Unprocessable callback query: %s", command.argument)
        return None

    def caption_for(self, session: Session) -> str:
        if not session.has_preset:
            return texts.MESSAGE_PRESET_NOT_SET
        args = " ".join(self._settings.presets.get(session.selected_preset, ()))
        return f"{session.selected_preset} ({args})"

    async def convert_voice(self, user_id: str, audio: bytes) -> VoiceResult:
        """Convert ``audio`` with the preset currently selected by ``user_id``.

        The session is only read under the store lock; the converter runs outside it.
        """

        session = await self._sessions.get(user_id)
        if session is None:
            raise SessionMissingError(user_id)
        converted = await self._converter.convert(audio, session.selected_preset)
        return VoiceResult(audio=converted, caption=self.caption_for(session))


def failure_text(error: Exception) -> str:
    """Message shown to the user when a voice note could not be converted."""

    return f"{texts.MESSAGE_CONVERSION_FAILED}: {error}"

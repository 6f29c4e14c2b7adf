"""Downloads voice notes from Telegram."""

from __future__ import annotations

import logging

from aiogram import Bot
from aiogram.exceptions import TelegramAPIError
from aiogram.types import Voice

logger = logging.getLogger(__name__)


class VoiceFetchError(RuntimeError):
    """Raised when the voice file cannot be retrieved from Telegram."""


class VoiceProcessor:
    """Fetches the raw bytes of a voice attachment."""

    async def download(self, bot: Bot, voice: Voice) -> bytes:
        """Return the content of ``voice`` as sent by the user."""

        try:
            file_info = await bot.get_file(voice.file_id)
            if not file_info.file_path:
                raise VoiceFetchError(f"Failed to get file: no path for {voice.file_id}")
            file_stream = await bot.download_file(file_info.file_path)
        except TelegramAPIError as exc:
            logger.warning("Cannot download voice %s: %s", voice.file_id, exc)
            raise VoiceFetchError(f"Failed to get file: {exc}") from exc

        try:
            return file_stream.read()
        finally:
            file_stream.close()

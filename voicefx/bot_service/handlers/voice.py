"""Voice note conversion handler."""

from __future__ import annotations

import logging

from aiogram import F, Router
from aiogram.enums import ChatAction
from aiogram.types import BufferedInputFile, Message

from voicefx.bot_service.context import BotContext
from voicefx.bot_service.keyboards import MAIN_KEYBOARD
from voicefx.bot_service.voice_processor import VoiceFetchError
from voicefx.converter import ConversionError
from voicefx.logic import failure_text
from voicefx.monitoring import metrics

logger = logging.getLogger(__name__)

VOICE_FILENAME = "voice.ogg"


def setup(router: Router, context: BotContext) -> None:
    """Register the voice message handler."""

    @router.message(F.voice)
    async def handle_voice(message: Message, user_id: str) -> None:
        await process_voice(message, context, user_id)


async def process_voice(message: Message, context: BotContext, user_id: str) -> None:
    """Download, convert and send back one voice note.

    Fetch and conversion failures are reported to the user as text; anything raised
    while talking to Telegram afterwards goes to the router error handler.
    """

    metrics.updates_total.labels(kind="voice").inc()
    bot = message.bot
    await bot.send_chat_action(chat_id=message.chat.id, action=ChatAction.RECORD_VOICE)

    try:
        audio = await context.voice_processor.download(bot, message.voice)
        result = await context.logic.convert_voice(user_id, audio)
    except (VoiceFetchError, ConversionError) as exc:
        logger.error("Voice synthesis failed for %s: %s", user_id, exc)
        metrics.conversions_total.labels(outcome="failure").inc()
        await message.answer(failure_text(exc), reply_markup=MAIN_KEYBOARD)
        return

    metrics.conversions_total.labels(outcome="success").inc()
    await bot.send_chat_action(chat_id=message.chat.id, action=ChatAction.UPLOAD_VOICE)
    await message.answer_voice(
        BufferedInputFile(result.audio, filename=VOICE_FILENAME),
        caption=result.caption,
        reply_markup=MAIN_KEYBOARD,
    )

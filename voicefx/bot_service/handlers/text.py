"""Chat commands: /start, /preset, /help and the unknown-command echo."""

from __future__ import annotations

from aiogram import F, Router
from aiogram.types import Message

from voicefx.bot_service.context import BotContext
from voicefx.monitoring import metrics


def setup(router: Router, context: BotContext) -> None:
    """Register the handler for every non-voice message."""

    @router.message(~F.voice)
    async def handle_text(message: Message, user_id: str) -> None:
        await process_text(message, context, user_id)


async def process_text(message: Message, context: BotContext, user_id: str) -> None:
    metrics.updates_total.labels(kind="message").inc()
    reply = context.logic.reply_for_text(message.text)
    await message.answer(reply.text, reply_markup=reply.reply_markup)

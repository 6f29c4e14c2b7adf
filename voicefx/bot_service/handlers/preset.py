"""Inline keyboard callbacks for preset selection."""

from __future__ import annotations

from aiogram import Router
from aiogram.types import CallbackQuery, Message

from voicefx.bot_service.commands import classify_callback
from voicefx.bot_service.context import BotContext
from voicefx.monitoring import metrics


def setup(router: Router, context: BotContext) -> None:
    """Register the callback query handler."""

    @router.callback_query()
    async def handle_callback(callback: CallbackQuery, user_id: str) -> None:
        await process_callback(callback, context, user_id)


async def process_callback(callback: CallbackQuery, context: BotContext, user_id: str) -> None:
    metrics.updates_total.labels(kind="callback_query").inc()
    answer = await context.logic.handle_callback(user_id, classify_callback(callback.data))
    if answer is None:
        return

    await callback.answer(answer)
    # dropping reply_markup removes the inline keyboard
    if isinstance(callback.message, Message):
        await callback.message.edit_text(answer)

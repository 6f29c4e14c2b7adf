"""Entrypoint for the voice effects Telegram bot."""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress

from aiogram import Bot, Dispatcher, Router

from voicefx.bot_service.context import BotContext
from voicefx.bot_service.handlers import setup_handlers
from voicefx.bot_service.voice_processor import VoiceProcessor
from voicefx.config.settings import Settings, get_settings
from voicefx.converter import SoxConverter
from voicefx.integrations import check_converter
from voicefx.logic import VoiceBotLogic
from voicefx.monitoring.logging import configure_logging
from voicefx.monitoring.metrics import start_exporter
from voicefx.storage import SessionStore

logger = logging.getLogger(__name__)


def build_context(settings: Settings) -> BotContext:
    """Create the session store, converter and logic shared by all handlers."""

    sessions = SessionStore(settings.available_ids)
    converter = SoxConverter.from_settings(settings)
    return BotContext(
        settings=settings,
        sessions=sessions,
        logic=VoiceBotLogic(settings, sessions, converter),
        voice_processor=VoiceProcessor(),
    )


def build_dispatcher(context: BotContext) -> Dispatcher:
    dispatcher = Dispatcher()
    router = Router()
    setup_handlers(router, context)
    dispatcher.include_router(router)
    return dispatcher


async def main() -> None:
    """Initialise dependencies and start polling Telegram."""

    settings = get_settings()
    configure_logging(settings)
    if not settings.api_token:
        raise RuntimeError("Telegram API token is not configured.")

    converter_check = await check_converter(settings)
    if not converter_check.success:
        logger.warning("Converter check failed: %s", converter_check.message)

    start_exporter(settings.metrics_port)

    context = build_context(settings)
    bot = Bot(token=settings.api_token)
    dispatcher = build_dispatcher(context)

    try:
        me = await bot.get_me()
        logger.info("Launching bot: @%s (%s)", me.username, me.first_name)
        # getUpdates does not work while a webhook is set
        if not await bot.delete_webhook():
            raise RuntimeError("Failed to delete webhook")
        logger.info(
            "Polling every %ds for %d allowed user(s).",
            settings.monitor_interval,
            len(context.sessions),
        )
        await dispatcher.start_polling(
            bot,
            polling_timeout=settings.monitor_interval,
            allowed_updates=dispatcher.resolve_used_update_types(),
        )
    finally:
        with suppress(Exception):
            await bot.session.close()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()

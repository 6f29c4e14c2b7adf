"""Register message, callback and error handlers."""

from __future__ import annotations

from aiogram import Router

from voicefx.bot_service.context import BotContext
from voicefx.bot_service.filters import AllowedUserFilter

from . import errors, preset, text, voice


def setup_handlers(router: Router, context: BotContext) -> None:
    """Attach all handler groups to the provided router."""

    allowed = AllowedUserFilter(context)
    router.message.filter(allowed)
    router.callback_query.filter(allowed)

    voice.setup(router, context)
    text.setup(router, context)
    preset.setup(router, context)
    errors.setup(router)

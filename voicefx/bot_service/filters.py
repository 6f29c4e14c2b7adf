"""Custom aiogram filters used by the bot."""

from __future__ import annotations

import logging
from typing import Any, Union

from aiogram.filters import BaseFilter
from aiogram.types import CallbackQuery, Message

from voicefx.bot_service.context import BotContext
from voicefx.monitoring import metrics

logger = logging.getLogger(__name__)


class AllowedUserFilter(BaseFilter):
    """Passes updates whose sender username is on the allow-list.

    The matched identity is handed to the handler as ``user_id``.
    """

    def __init__(self, context: BotContext) -> None:
        self._context = context

    async def __call__(self, event: Union[Message, CallbackQuery]) -> bool | dict[str, Any]:
        user = event.from_user
        if user is None or not user.username:
            name = user.first_name if user else "unknown"
            logger.warning("Not allowed (no user name): %s", name)
            metrics.rejected_updates_total.inc()
            return False
        user_id = user.username
        if not self._context.settings.is_available_id(user_id):
            logger.warning("Id not allowed: %s", user_id)
            metrics.rejected_updates_total.inc()
            return False
        return {"user_id": user_id}

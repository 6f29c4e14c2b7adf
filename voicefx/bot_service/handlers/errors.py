"""Router-level error handler."""

from __future__ import annotations

import logging

from aiogram import Router
from aiogram.types import ErrorEvent

logger = logging.getLogger(__name__)


def setup(router: Router) -> None:
    """Log failures of a single update and keep polling."""

    @router.errors()
    async def handle_error(event: ErrorEvent) -> bool:
        logger.error(
            "Failed to process update %s: %s",
            event.update.update_id,
            event.exception,
            exc_info=event.exception,
        )
        return True

"""Connectivity checks for the converter binary and the Telegram API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable

from aiogram import Bot

from voicefx.config.settings import Settings


@dataclass(slots=True)
class IntegrationCheckResult:
    """Structured result describing the integration check outcome."""

    name: str
    success: bool
    message: str


async def _run_check(
    name: str,
    factory: Callable[[], Awaitable[bool]],
    success_message: str,
) -> IntegrationCheckResult:
    try:
        result = await factory()
    except Exception as exc:
        return IntegrationCheckResult(name=name, success=False, message=str(exc))

    if result:
        return IntegrationCheckResult(name=name, success=True, message=success_message)
    return IntegrationCheckResult(
        name=name,
        success=False,
        message="Check returned non-success status.",
    )


async def check_converter(settings: Settings) -> IntegrationCheckResult:
    """Run ``<sox_bin> --version`` and report whether it exits cleanly."""

    async def _version() -> bool:
        process = await asyncio.create_subprocess_exec(
            settings.sox_bin,
            "--version",
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        await process.communicate()
        return process.returncode == 0

    return await _run_check(
        name="Converter",
        factory=_version,
        success_message=f"{settings.sox_bin} is runnable.",
    )


async def check_telegram(settings: Settings) -> IntegrationCheckResult:
    """Call ``getMe`` with the configured token."""

    async def _get_me() -> bool:
        bot = Bot(token=settings.api_token)
        try:
            me = await bot.get_me()
            return me.is_bot
        finally:
            await bot.session.close()

    return await _run_check(
        name="Telegram",
        factory=_get_me,
        success_message="Telegram Bot API accepted the token.",
    )


async def run_all_checks(settings: Settings) -> list[IntegrationCheckResult]:
    """Execute all integration checks concurrently."""

    return list(await asyncio.gather(check_converter(settings), check_telegram(settings)))

"""Shared dependencies passed into handler setup functions."""

from __future__ import annotations

from dataclasses import dataclass

from voicefx.bot_service.voice_processor import VoiceProcessor
from voicefx.config.settings import Settings
from voicefx.logic import VoiceBotLogic
from voicefx.storage import SessionStore


@dataclass(slots=True)
class BotContext:
    """Container for objects shared across handlers."""

    settings: Settings
    sessions: SessionStore
    logic: VoiceBotLogic
    voice_processor: VoiceProcessor

"""Logging configuration module."""

from __future__ import annotations

import logging

from voicefx.config.settings import Settings


def configure_logging(settings: Settings) -> None:
    """Configure root logger according to project conventions."""

    logging.basicConfig(
        level=logging.DEBUG if settings.is_verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

"""Telegram bot that applies SoX effect presets to voice notes."""

__version__ = "0.1.0"

"""Telegram-facing layer of the bot."""

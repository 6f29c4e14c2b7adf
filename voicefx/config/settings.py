"""Bot configuration loaded once from a JSON file."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

DEFAULT_CONFIG_PATH = "config.json"
DEFAULT_MONITOR_INTERVAL = 3


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be read or is malformed."""


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Static settings shared by the converter and the dispatcher."""

    api_token: str = ""
    sox_bin: str = "sox"
    presets: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    available_ids: tuple[str, ...] = ()
    monitor_interval: int = DEFAULT_MONITOR_INTERVAL
    is_verbose: bool = False
    metrics_port: int = 0

    def is_available_id(self, user_id: str | None) -> bool:
        """Return True when ``user_id`` is on the allow-list."""

        return bool(user_id) and user_id in self.available_ids


def _expect(value: Any, kind: type | tuple[type, ...], key: str) -> Any:
    # bool is an int subclass, which json happily produces for "true"
    if isinstance(value, bool) and kind is int:
        raise ConfigError(f"'{key}' must be an integer, got {value!r}")
    if not isinstance(value, kind):
        raise ConfigError(f"'{key}' has unexpected type {type(value).__name__}")
    return value


def _value(payload: Mapping[str, Any], key: str, default: Any) -> Any:
    # JSON null behaves like an absent key
    value = payload.get(key)
    return default if value is None else value


def _parse_presets(raw: Any) -> Mapping[str, tuple[str, ...]]:
    presets = _expect(raw, dict, "sox_presets")
    parsed: dict[str, tuple[str, ...]] = {}
    for name, args in presets.items():
        if args is None:
            args = []
        _expect(args, list, f"sox_presets.{name}")
        for arg in args:
            _expect(arg, str, f"sox_presets.{name}")
        parsed[name] = tuple(args)
    return MappingProxyType(parsed)


def parse_settings(payload: Mapping[str, Any]) -> Settings:
    """Build :class:`Settings` from a decoded config document."""

    if not isinstance(payload, Mapping):
        raise ConfigError("Config root must be a JSON object.")

    monitor_interval = _expect(_value(payload, "monitor_interval", 0), int, "monitor_interval")
    if monitor_interval <= 0:
        monitor_interval = DEFAULT_MONITOR_INTERVAL

    available_ids = _expect(_value(payload, "available_ids", []), list, "available_ids")
    for user_id in available_ids:
        _expect(user_id, str, "available_ids")

    return Settings(
        api_token=os.getenv("TELEGRAM_BOT_TOKEN") or _expect(_value(payload, "api_token", ""), str, "api_token"),
        sox_bin=_expect(_value(payload, "sox_bin", "sox"), str, "sox_bin") or "sox",
        presets=_parse_presets(_value(payload, "sox_presets", {})),
        available_ids=tuple(available_ids),
        monitor_interval=monitor_interval,
        is_verbose=_expect(_value(payload, "is_verbose", False), bool, "is_verbose"),
        metrics_port=_expect(_value(payload, "metrics_port", 0), int, "metrics_port"),
    )


def load_settings(path: str | Path) -> Settings:
    """Read and validate the JSON config file at ``path``."""

    config_path = Path(path)
    try:
        body = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Malformed config file {config_path}: {exc}") from exc
    return parse_settings(payload)


def _build_settings() -> Settings:
    _load_env_file()
    return load_settings(os.getenv("VOICEFX_CONFIG", DEFAULT_CONFIG_PATH))


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()

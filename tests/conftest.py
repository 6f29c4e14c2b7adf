"""Shared fixtures for the voicefx test-suite."""

from __future__ import annotations

import stat
import sys
from pathlib import Path
from types import MappingProxyType
from typing import Callable

import pytest

from voicefx.config.settings import Settings

PRESETS = {
    "chipmunk": ("pitch", "800"),
    "slow": ("speed", "0.7"),
    "robot": ("overdrive", "10", "echo", "0.8", "0.8", "5", "0.7"),
}

needs_posix_shell = pytest.mark.skipif(sys.platform == "win32", reason="uses /bin/sh scripts")


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        api_token="123:test",
        sox_bin="sox",
        presets=MappingProxyType(dict(PRESETS)),
        available_ids=("alice", "bob"),
    )


@pytest.fixture()
def make_script(tmp_path: Path) -> Callable[[str], str]:
    """Write an executable shell script standing in for the converter binary."""

    def _make(body: str, name: str = "fake-sox") -> str:
        path = tmp_path / name
        path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(path)

    return _make

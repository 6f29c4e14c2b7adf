"""Check that the SoX binary runs and the bot token is accepted."""

from __future__ import annotations

import asyncio
import sys
from typing import Iterable

from voicefx.config.settings import ConfigError, get_settings
from voicefx.integrations import IntegrationCheckResult, run_all_checks


def _format_result(result: IntegrationCheckResult) -> str:
    status = "✅" if result.success else "❌"
    return f"{status} {result.name}: {result.message}"


def print_results(results: Iterable[IntegrationCheckResult]) -> bool:
    """Print one line per check and return True when all of them passed."""

    ok = True
    for result in results:
        print(_format_result(result))
        ok = ok and result.success
    return ok


def main() -> int:
    try:
        settings = get_settings()
    except ConfigError as exc:
        print(f"❌ Config: {exc}")
        return 2
    return 0 if print_results(asyncio.run(run_all_checks(settings))) else 1


if __name__ == "__main__":
    sys.exit(main())

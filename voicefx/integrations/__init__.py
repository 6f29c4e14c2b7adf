"""Integration check helpers."""

from .checks import (
    IntegrationCheckResult,
    check_converter,
    check_telegram,
    run_all_checks,
)

__all__ = [
    "IntegrationCheckResult",
    "check_converter",
    "check_telegram",
    "run_all_checks",
]

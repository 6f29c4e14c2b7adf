"""Prometheus exporter helpers."""

from __future__ import annotations

import logging

from prometheus_client import Counter, start_http_server

logger = logging.getLogger(__name__)


updates_total = Counter(
    "voicefx_updates_total",
    "Total number of accepted Telegram updates.",
    ["kind"],
)

rejected_updates_total = Counter(
    "voicefx_rejected_updates_total",
    "Number of updates dropped because the sender is not allowed.",
)

conversions_total = Counter(
    "voicefx_conversions_total",
    "Voice conversions grouped by outcome.",
    ["outcome"],
)


def start_exporter(port: int) -> bool:
    """Expose metrics on ``port``; a non-positive port disables the exporter."""

    if port <= 0:
        return False
    start_http_server(port)
    logger.info("Metrics exporter listening on :%d", port)
    return True

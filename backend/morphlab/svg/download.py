"""Download naming helpers."""

from __future__ import annotations

import time


def now_millis() -> int:
    return int(time.time() * 1000)


def suggested_filename(timestamp_ms: int | None = None) -> str:
    if timestamp_ms is None:
        timestamp_ms = now_millis()
    return f"morphlab-{timestamp_ms}.svg"

"""Time utilities for timestamps and durations. All datetimes in UTC."""

import time
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return current UTC datetime. Use for export timestamps."""
    return datetime.now(timezone.utc)


def elapsed_ms(started: float) -> float:
    """Milliseconds since a time.perf_counter() reading."""
    return (time.perf_counter() - started) * 1000.0

from __future__ import annotations

import time
from datetime import date, datetime, timezone


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_millis() -> int:
    """Current unix time in milliseconds.

    Note: Wrapped so tests can inject a fixed clock.
    """
    return int(time.time() * 1000)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()

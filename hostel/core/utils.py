"""
Shared utility functions for the hostel backend.

This module contains common utilities used across the codebase.
"""

from __future__ import annotations

import threading
import time
from datetime import datetime, timezone

_id_lock = threading.Lock()
_last_id = 0


def generate_id() -> str:
    """
    Generate a record ID from the current time in milliseconds.

    IDs are strictly increasing within the process: two calls in the same
    millisecond get consecutive values instead of colliding.

    Returns:
        A numeric string like "1718000000123"
    """
    global _last_id
    with _id_lock:
        candidate = time.time_ns() // 1_000_000
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
    return str(candidate)


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime | None = None) -> str:
    """Format a UTC datetime as ISO-8601 with milliseconds, e.g. 2024-05-01T10:00:00.000Z."""
    moment = moment or utc_now()
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

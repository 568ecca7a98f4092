"""Timestamp utilities."""

import math
import time
from datetime import datetime, timezone

UINT32_MASK = 0xFFFFFFFF


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return int(time.time() * 1_000_000)


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    dt = datetime.fromtimestamp(epoch_us / 1_000_000, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"


def unix_seconds(value):
    """Truncate seconds or a datetime to an unsigned 32-bit second count.

    Naive datetimes are taken as UTC. Values outside [0, 2**32) wrap.
    NaN and infinities map to 0.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.timestamp()
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return int(value) & UINT32_MASK


def from_unix_seconds(seconds):
    """UTC datetime for a second count."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)

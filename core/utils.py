# ============================================================================
# CORE UTILITIES
# ============================================================================
# STATUS: Core utilities - Shared display formatting
# PURPOSE: Byte sizes, durations, timestamps and the wall clock
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: format_bytes, format_duration, format_timestamp, current_time_millis
# DEPENDENCIES: time, datetime, zoneinfo
# ============================================================================

"""
Core utility functions.

Formatting conventions shared by every dashboard panel. All times are
epoch milliseconds.
"""

import time
from datetime import datetime, timezone, tzinfo
from typing import Optional

_KB = 1 << 10
_MB = 1 << 20
_GB = 1 << 30
_TB = 1 << 40

DEFAULT_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def current_time_millis() -> int:
    """Wall clock in epoch milliseconds."""
    return int(time.time() * 1000)


def format_bytes(size: int) -> str:
    """
    Convert a byte count to a human-readable string.

    A unit is only used once the value reaches twice that unit, so
    1500 bytes stays "1500.0 B" and 2048 becomes "2.0 KB".

    Args:
        size: Byte count

    Returns:
        One decimal place plus a binary unit suffix (B, KB, MB, GB, TB)

    Example:
        >>> format_bytes(3 * 1024 * 1024)
        '3.0 MB'
    """
    if size >= 2 * _TB:
        value, unit = size / _TB, "TB"
    elif size >= 2 * _GB:
        value, unit = size / _GB, "GB"
    elif size >= 2 * _MB:
        value, unit = size / _MB, "MB"
    elif size >= 2 * _KB:
        value, unit = size / _KB, "KB"
    else:
        value, unit = float(size), "B"
    return f"{value:.1f} {unit}"


def format_duration(milliseconds: int) -> str:
    """
    Convert a millisecond span to a human-readable duration.

    Adaptive unit:
        < 1 s      -> "250 ms"
        < 1 min    -> "2.3 s"
        < 10 min   -> "1.5 min"
        < 1 h      -> "42 min"
        otherwise  -> "1.2 h"

    Negative spans are shown as 0 ms. Units are chosen on the rounded
    value, so 59_999 ms reads "1.0 min" rather than "60.0 s".
    """
    milliseconds = max(0, milliseconds)
    if milliseconds < 1000:
        return f"{int(milliseconds)} ms"
    seconds = milliseconds / 1000
    if round(seconds, 1) < 60:
        return f"{seconds:.1f} s"
    minutes = seconds / 60
    if round(minutes, 1) < 10:
        return f"{minutes:.1f} min"
    if round(minutes) < 60:
        return f"{minutes:.0f} min"
    hours = minutes / 60
    return f"{hours:.1f} h"


def format_timestamp(
    millis: int,
    date_format: str = DEFAULT_DATE_FORMAT,
    tz: Optional[tzinfo] = None,
) -> str:
    """
    Format an epoch-millisecond timestamp for display.

    Args:
        millis: Epoch milliseconds
        date_format: strftime pattern (default "%Y/%m/%d %H:%M:%S")
        tz: Display zone (default UTC)

    Returns:
        Formatted timestamp string
    """
    moment = datetime.fromtimestamp(millis / 1000, tz=tz or timezone.utc)
    return moment.strftime(date_format)

"""Human readable rendering of byte counts and durations."""
from __future__ import annotations

from typing import Optional

BYTE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_bytes(num_bytes: Optional[float]) -> str:
    """Render a byte count using base-1024 units with two decimals.

    The unit is the largest one keeping the value at or above 1, i.e.
    ``floor(log1024(n))``. Values past the last unit stay in TB
    (``1024 ** 5`` -> ``"1024.00 TB"``).
    """
    if not num_bytes:
        return "0 B"
    value = float(num_bytes)
    index = 0
    # Exact at powers of 1024, unlike floor(log(n) / log(1024)).
    while abs(value) >= 1024 and index < len(BYTE_UNITS) - 1:
        value /= 1024
        index += 1
    return f"{value:.2f} {BYTE_UNITS[index]}"


def format_uptime(seconds: float) -> str:
    seconds = int(seconds)
    days = seconds // 86400
    hours = (seconds % 86400) // 3600
    minutes = (seconds % 3600) // 60
    return f"{days}d {hours}h {minutes}m"

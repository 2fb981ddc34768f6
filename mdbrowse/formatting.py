from __future__ import annotations

from datetime import datetime, timezone


def format_timestamp(ts: float) -> str:
    """Return a standardized string for file times (local time, YYYY-MM-DD HH:MM)."""
    dt = datetime.fromtimestamp(ts, tz=timezone.utc).astimezone()
    return dt.strftime("%Y-%m-%d %H:%M")


def format_size(size: int) -> str:
    """Human-readable byte count: 512B, 1.5K, 12M."""
    value = float(size)
    for unit in ("B", "K", "M", "G", "T"):
        if value < 1024 or unit == "T":
            if unit == "B":
                return f"{int(value)}B"
            return f"{value:.1f}{unit}"
        value /= 1024
    return f"{size}B"

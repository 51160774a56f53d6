"""Formatting helpers for byte counts and rates."""

from __future__ import annotations

UNITS = ("B", "KiB", "MiB", "GiB", "TiB")


def _scale(num_bytes: int | float) -> tuple[str, str]:
    for unit in UNITS:
        if abs(num_bytes) < 1024.0 or unit == UNITS[-1]:
            if unit == "B":
                return f"{int(num_bytes)}", unit
            return f"{num_bytes:.1f}", unit
        num_bytes /= 1024.0
    return f"{num_bytes:.1f}", UNITS[-1]


def format_bytes(num_bytes: int | float) -> str:
    """Format byte count to human-readable string.

    Examples:
        format_bytes(0) -> "0 B"
        format_bytes(1023) -> "1023 B"
        format_bytes(1024) -> "1.0 KiB"
        format_bytes(1048576) -> "1.0 MiB"
    """
    if num_bytes < 0:
        return f"-{format_bytes(-num_bytes)}"
    value, unit = _scale(num_bytes)
    return f"{value} {unit}"


def format_rate(bytes_per_second: int | float) -> tuple[str, str]:
    """Split a rate into its numeric part and its unit part.

    The two parts are rendered with different styles, so they are kept apart.

    Examples:
        format_rate(0) -> ("0", "B/s")
        format_rate(2000) -> ("2.0", "KiB/s")
        format_rate(12595.2) -> ("12.3", "KiB/s")
    """
    value, unit = _scale(max(0, bytes_per_second))
    return value, f"{unit}/s"

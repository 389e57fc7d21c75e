"""Human-readable byte sizes."""

from __future__ import annotations

_UNITS = ("Bytes", "KB", "MB", "GB", "TB")
_BASE = 1024


def format_bytes(size: int, decimals: int = 2) -> str:
    """Format a byte count with a 1024 base (`1536` -> `"1.5 KB"`).

    Args:
        size (int): Size in bytes.
        decimals (int): Maximum number of decimals; trailing zeros are dropped.

    Returns:
        str: Formatted size.
    """
    if size <= 0:
        return "0 Bytes"

    value = float(size)
    unit_index = 0
    while value >= _BASE and unit_index < len(_UNITS) - 1:
        value /= _BASE
        unit_index += 1

    text = f"{value:.{max(decimals, 0)}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {_UNITS[unit_index]}"

"""
Value formatting helpers for summary renderers.

Every helper accepts any property value, ABSENT included, and returns the
placeholder instead of raising when the value cannot be formatted.
"""

from __future__ import annotations

from typing import Any

from vsphere_fs.types import is_absent

PLACEHOLDER = "-"

_DECIMAL_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")


def _number(value: Any) -> float | None:
    if is_absent(value) or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def text(value: Any) -> str:
    """``str(value)``, or the placeholder for an absent or empty value."""
    if is_absent(value) or value == "":
        return PLACEHOLDER
    return str(value)


def scaled(value: Any, divisor: float, digits: int = 2) -> str:
    """
    Divide a numeric value and format it with fixed decimals.

    >>> scaled(2400, 1000)
    '2.40'
    """
    number = _number(value)
    if number is None:
        return PLACEHOLDER
    return f"{number / divisor:.{digits}f}"


def decimal_size(value: Any) -> str:
    """
    Human-readable byte count using powers of 1000.

    >>> decimal_size(1_200_000_000_000)
    '1.20 TB'
    """
    number = _number(value)
    if number is None:
        return PLACEHOLDER

    unit = _DECIMAL_UNITS[0]
    for unit in _DECIMAL_UNITS:
        if abs(number) < 1000 or unit == _DECIMAL_UNITS[-1]:
            break
        number /= 1000
    return f"{number:.2f} {unit}"

"""
Byte-size humanization.

Sizes use decimal SI units (base 1000), one decimal place below 10 and
none from 10 upwards, e.g. ``2048 -> "2.0 kB"`` and ``15360 -> "15 kB"``.
Values under 10 bytes are printed as-is.
"""

import math

SI_BASE = 1000
SI_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB")


def human_bytes(size: int) -> str:
    """Format a byte count as a human-readable string."""
    if size < 10:
        return f"{size} B"

    exponent = 0
    while exponent < len(SI_UNITS) - 1 and size >= SI_BASE ** (exponent + 1):
        exponent += 1

    value = math.floor(size / SI_BASE**exponent * 10 + 0.5) / 10
    if value < 10:
        return f"{value:.1f} {SI_UNITS[exponent]}"
    return f"{value:.0f} {SI_UNITS[exponent]}"

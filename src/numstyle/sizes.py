"""Human-readable byte sizes."""

from __future__ import annotations

import math

from numstyle.notation import to_fixed, to_plain_string

BYTE_UNITS: tuple[str, ...] = ("Bytes", "KB", "MB", "GB", "TB")
ZERO_BYTES = "0 Byte"

_STEP = 1024


def unit_index(size: float) -> int:
    """Index into BYTE_UNITS for a positive finite size, clamped to the table."""
    index = math.floor(math.log(size) / math.log(_STEP))
    # log() is inexact at exact powers of 1024
    if _STEP ** (index + 1) <= size:
        index += 1
    elif _STEP**index > size:
        index -= 1
    return min(max(index, 0), len(BYTE_UNITS) - 1)


def format_byte_size(size: float) -> str:
    """Format a byte count with a binary unit suffix.

    Sizes below one byte stay in "Bytes", sizes of 1024 TB and above stay
    in "TB", and negative sizes render as the magnitude with a leading minus.

    Example:
        format_byte_size(0)        # "0 Byte"
        format_byte_size(1536)     # "1.50 KB"
        format_byte_size(1048576)  # "1.00 MB"
    """
    if not math.isfinite(size):
        return to_plain_string(size)
    if size == 0:
        return ZERO_BYTES
    if size < 0:
        return f"-{format_byte_size(-size)}"

    index = unit_index(size)
    return f"{to_fixed(size / _STEP**index, 2)} {BYTE_UNITS[index]}"

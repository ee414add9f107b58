"""Clock-style duration rendering (HH:MM:SS and HH:MM:SS.mmm)."""

from __future__ import annotations

import math

from numstyle.notation import to_plain_string


def _clock(seconds: float) -> str:
    hours = math.floor(seconds / 3600)
    minutes = math.floor((seconds % 3600) / 60)
    secs = math.floor(seconds % 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_duration(seconds: float) -> str:
    """Format a number of seconds as HH:MM:SS.

    Each field is zero-padded to at least two digits; hours are never
    truncated. Negative durations render as the magnitude with a leading
    minus, and infinities use plain conversion.

    Args:
        seconds: Duration in seconds.

    Returns:
        Formatted duration, e.g. "01:01:01" for 3661.
    """
    if not math.isfinite(seconds):
        return to_plain_string(seconds)
    if seconds < 0:
        return f"-{_clock(-seconds)}"
    return _clock(seconds)


def format_milliseconds(milliseconds: float) -> str:
    """Format a number of milliseconds as HH:MM:SS.mmm.

    Args:
        milliseconds: Duration in milliseconds.

    Returns:
        Formatted duration, e.g. "25:01:01.000" for 90061000.
    """
    if not math.isfinite(milliseconds):
        return to_plain_string(milliseconds)
    if milliseconds < 0:
        return f"-{format_milliseconds(-milliseconds)}"
    remainder = math.floor(milliseconds % 1000)
    return f"{_clock(milliseconds / 1000)}.{remainder:03d}"

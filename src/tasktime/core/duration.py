# src/tasktime/core/duration.py

"""
Duration codec.

Two textual forms are supported:
- display form "HH:MM:SS" (hours are not wrapped at 24),
- input token "XXhYYm", where either part may be omitted but not both.
"""

from __future__ import annotations

import re

from .errors import InvalidFormatError

TOKEN_HELP = "Time in XXhYYm format. Example: 1h30m"

_TOKEN_RE = re.compile(r"(?:(?P<hours>[0-9]+)h)?(?:(?P<minutes>[0-9]+)m)?")


def format_duration(seconds: int) -> str:
    seconds = max(0, int(seconds))
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02}:{minutes:02}:{secs:02}"


def parse_time_token(token: str) -> int:
    """
    Parse "1h30m", "2h" or "45m" into seconds.

    Raises InvalidFormatError when no marker is present or when a numeric
    segment is empty or contains anything but ASCII digits.
    """
    raw = token or ""
    if "h" not in raw and "m" not in raw:
        raise InvalidFormatError(f"Invalid time '{raw}': expected XXhYYm, XXh or YYm")

    match = _TOKEN_RE.fullmatch(raw)
    if match is None:
        raise InvalidFormatError(f"Invalid time '{raw}': expected XXhYYm, XXh or YYm")

    hours = int(match.group("hours") or 0)
    minutes = int(match.group("minutes") or 0)
    return hours * 3600 + minutes * 60


def format_token(seconds: int) -> str:
    """Render whole minutes of `seconds` as a token; leftover seconds are dropped."""
    total_minutes = max(0, int(seconds)) // 60
    hours, minutes = divmod(total_minutes, 60)
    if hours and minutes:
        return f"{hours}h{minutes}m"
    if hours:
        return f"{hours}h"
    return f"{minutes}m"

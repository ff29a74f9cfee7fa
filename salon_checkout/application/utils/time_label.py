from __future__ import annotations

import re

_TIME_PATTERNS = (
    re.compile(r"\b(?P<hour>\d{1,2}):(?P<minute>\d{2})\s*(?P<meridiem>am|pm)?\b"),
    re.compile(r"\b(?P<hour>\d{1,2})\s*(?P<meridiem>am|pm)\b"),
)


def parse_clock_label(label: str | None) -> tuple[int, int, str | None] | None:
    """Split a time label into (hour as written, minute, "am"/"pm" or None)."""
    if not label:
        return None
    normalized = label.lower().replace(".", "").strip()

    for pattern in _TIME_PATTERNS:
        match = pattern.search(normalized)
        if not match:
            continue
        hour = int(match.group("hour"))
        minute = int(match.groupdict().get("minute") or 0)
        meridiem = match.group("meridiem")

        if meridiem and not 1 <= hour <= 12:
            return None
        if not (0 <= hour <= 23 and 0 <= minute <= 59):
            return None
        return (hour, minute, meridiem)

    return None


def parse_time_label(label: str | None) -> tuple[int, int] | None:
    """Parse an appointment time label ("7:00 PM", "7pm", "19:30") into 24h (hour, minute)."""
    parsed = parse_clock_label(label)
    if parsed is None:
        return None
    hour, minute, meridiem = parsed
    if meridiem == "pm" and hour != 12:
        hour += 12
    elif meridiem == "am" and hour == 12:
        hour = 0
    return (hour, minute)


def is_evening(label: str | None, start_hour: int = 6) -> bool:
    """PM labels whose written hour is start_hour or later. 24h labels never qualify."""
    parsed = parse_clock_label(label)
    if parsed is None:
        return False
    hour, _, meridiem = parsed
    return meridiem == "pm" and hour >= start_hour

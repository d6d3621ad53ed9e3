# hr_core/reminders/timing.py
"""
Turn the free-text timing a doctor writes ("9:30 pm", "after lunch"...) into
daily HH:MM slots.

  blank                      -> 09:00, 14:00, 21:00
  H:MM / HH:MM [am|pm]       -> that time (12am = 00:00, 12pm = 12:00)
  morning, lunch, night...   -> the mapped time
  anything else              -> 09:00, 14:00, 21:00

Out-of-range clock values are treated as unrecognised text.
"""
from __future__ import annotations

import re

DEFAULT_SLOTS = ("09:00", "14:00", "21:00")

TIMING_VOCABULARY = {
    "morning": "09:00",
    "afternoon": "14:00",
    "evening": "20:00",
    "night": "21:00",
    "breakfast": "08:00",
    "lunch": "13:00",
    "dinner": "20:00",
}

_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})\s*(am|pm)?$", re.IGNORECASE)


def _parse_clock(text: str) -> str | None:
    match = _CLOCK_PATTERN.match(text)
    if match is None:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    meridiem = (match.group(3) or "").lower()

    if minutes > 59:
        return None

    if meridiem:
        if not 1 <= hours <= 12:
            return None
        if meridiem == "pm" and hours != 12:
            hours += 12
        elif meridiem == "am" and hours == 12:
            hours = 0
    elif hours > 23:
        return None

    return f"{hours:02d}:{minutes:02d}"


def parse_timing(timing: str | None) -> list[str]:
    text = (timing or "").strip()
    if not text:
        return list(DEFAULT_SLOTS)

    slot = _parse_clock(text)
    if slot is not None:
        return [slot]

    named = TIMING_VOCABULARY.get(text.lower())
    if named is not None:
        return [named]

    return list(DEFAULT_SLOTS)

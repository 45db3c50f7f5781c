"""Day-naming and time-notation conventions, plus inline (embedded) time ranges.

Each function takes the cleaned document text and returns one label.  The
categories are tested independently; when more than one is present the
document is reported as ``mixed``.
"""

from timetable_prep.detection.patterns import (
    ABBREVIATED_DAY_RE,
    EMBEDDED_TIME_PATTERNS,
    FULL_DAY_RE,
    PERIOD_RE,
    SINGLE_LETTER_DAY_RE,
    TIME_12_HOUR_RE,
    TIME_24_HOUR_RE,
)
from timetable_prep.detection.schema import DayFormat, TimeFormat


def detect_day_format(text: str) -> DayFormat:
    """Return how weekdays are written: full names, abbreviations, single letters, or a mix.

    Defaults to ``full`` when no day token is found.
    """
    found = [
        fmt
        for fmt, pattern in (
            (DayFormat.FULL, FULL_DAY_RE),
            (DayFormat.ABBREVIATED, ABBREVIATED_DAY_RE),
            (DayFormat.SINGLE, SINGLE_LETTER_DAY_RE),
        )
        if pattern.search(text)
    ]
    if len(found) > 1:
        return DayFormat.MIXED
    if found:
        return found[0]
    return DayFormat.FULL


def detect_time_format(text: str) -> TimeFormat:
    """Return the time notation used: 12-hour, 24-hour, numbered periods, or a mix.

    A bare "9:00" also matches the 24-hour pattern, so 24-hour only counts
    when no AM/PM marker appears anywhere in the text.  Defaults to ``mixed``.
    """
    has_12_hour = bool(TIME_12_HOUR_RE.search(text))
    has_24_hour = not has_12_hour and bool(TIME_24_HOUR_RE.search(text))
    has_period = bool(PERIOD_RE.search(text))

    found = [
        fmt
        for fmt, present in (
            (TimeFormat.TWELVE_HOUR, has_12_hour),
            (TimeFormat.TWENTY_FOUR_HOUR, has_24_hour),
            (TimeFormat.PERIOD, has_period),
        )
        if present
    ]
    if len(found) == 1:
        return found[0]
    return TimeFormat.MIXED


def detect_embedded_times(text: str) -> bool:
    """Return True if time ranges sit inline next to words, e.g. '1:15-2:30 Science'."""
    return any(pattern.search(text) for pattern in EMBEDDED_TIME_PATTERNS)

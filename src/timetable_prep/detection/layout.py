"""Grid sub-layout classification.

Rules are checked in precedence order and the first match wins:
  daily-schedules  -- "Daily Schedule" heading plus a numbered time line
  fixed-columns    -- 2+ fixed activity column headings and 3+ day rows
  horizontal-days  -- Mon / Tue / Wed in sequence on one line
  vertical-days    -- 3+ day rows, one of them carrying 2+ times
"""

from timetable_prep.detection.patterns import (
    DAILY_SCHEDULE_HEADING_RE,
    DAY_LINE_START_RE,
    FIXED_COLUMN_ACTIVITIES,
    HORIZONTAL_DAYS_RE,
    NUMBERED_TIME_LINE_RE,
    VERTICAL_DAY_ROW_RE,
)
from timetable_prep.detection.schema import LayoutType

MIN_DAY_LINES = 3
MIN_FIXED_COLUMNS = 2


def count_day_lines(text: str) -> int:
    """Count lines that begin with a weekday token (full, abbreviated, or letter + space)."""
    return sum(1 for line in text.split("\n") if DAY_LINE_START_RE.match(line.strip()))


def is_daily_schedule(text: str) -> bool:
    return bool(DAILY_SCHEDULE_HEADING_RE.search(text) and NUMBERED_TIME_LINE_RE.search(text))


def has_fixed_columns(text: str) -> bool:
    matched = sum(1 for pattern in FIXED_COLUMN_ACTIVITIES if pattern.search(text))
    return matched >= MIN_FIXED_COLUMNS


def detect_layout_type(text: str) -> LayoutType | None:
    """Return the grid sub-layout of *text*, or None when no rule applies."""
    if is_daily_schedule(text):
        return LayoutType.DAILY_SCHEDULES

    day_lines = count_day_lines(text)
    if has_fixed_columns(text) and day_lines >= MIN_DAY_LINES:
        return LayoutType.FIXED_COLUMNS
    if HORIZONTAL_DAYS_RE.search(text):
        return LayoutType.HORIZONTAL_DAYS
    if day_lines >= MIN_DAY_LINES and VERTICAL_DAY_ROW_RE.search(text):
        return LayoutType.VERTICAL_DAYS
    return None

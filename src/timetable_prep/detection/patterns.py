"""Compiled regex patterns and constant tables for timetable format detection.

These patterns identify structural elements in OCR-extracted timetable text:
weekday tokens, time notations, numbered/bulleted schedule lines, document
header metadata, and the recurring activities of a primary-school day.  Used by
conventions.py, activities.py, layout.py and classify.py.

All patterns are evaluated against cleaned text whose line boundaries are
intact, so the ``re.MULTILINE`` anchors below are meaningful.  Patterns that use
``\d``, ``\w`` or ``\b`` are compiled with ``re.ASCII``: only 0-9 count as
digits, and accented letters are not word characters.
"""

import re

# ─── Shared Fragments ─────────────────────────────────────────────────────────

FULL_DAY_NAMES = r"Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday"
MONTH_NAMES = r"January|February|March|April|May|June|July|August|September|October|November|December"

# A clock time such as "9:00" or "10.45"
TIME_TOKEN = r"\d{1,2}[:.]\d{2}"

# A time range such as "9:00-9:45" or "10.30 - 11.00"
TIME_RANGE = rf"{TIME_TOKEN}\s*-\s*{TIME_TOKEN}"


# ─── Format Classifier Indicators ─────────────────────────────────────────────

# Each indicator contributes at most one point, however often it matches.
GRID_INDICATORS = (
    # Horizontal day layout (days on the same line)
    re.compile(r"\bMonday\b.*\bTuesday\b.*\bWednesday\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\bMon\b.*\bTue\b.*\bWed\b", re.IGNORECASE | re.ASCII),
    # Table borders around a day header
    re.compile(r"\|\s*Mon\s*\||\|\s*Monday\s*\|", re.IGNORECASE),
    # Vertical day layout: a day token at line start followed by a time.
    # Case-sensitive single-letter class; "h" lets "Th" through.
    re.compile(rf"^[MTWThF]\s+.*{TIME_TOKEN}", re.MULTILINE | re.ASCII),
    re.compile(rf"^(?:Mon|Tue|Tues|Wed|Thu|Thur|Thurs|Fri|Sat|Sun)\s+.*{TIME_TOKEN}", re.IGNORECASE | re.MULTILINE | re.ASCII),
    re.compile(rf"^(?:{FULL_DAY_NAMES})\s+.*{TIME_TOKEN}", re.IGNORECASE | re.MULTILINE | re.ASCII),
    # Time slots arranged horizontally
    re.compile(rf"{TIME_TOKEN}\s*-?\s*{TIME_TOKEN}.*{TIME_TOKEN}\s*-?\s*{TIME_TOKEN}", re.ASCII),
    re.compile(rf"{TIME_TOKEN}.*{TIME_TOKEN}.*{TIME_TOKEN}", re.ASCII),
    # Lexical cues.  A "Daily Schedule" heading is list evidence, not grid evidence.
    re.compile(r"\btimetable\b", re.IGNORECASE | re.ASCII),
    re.compile(r"(?<!daily )\bschedule\b", re.IGNORECASE | re.ASCII),
    re.compile(r"\breception.*timetable", re.IGNORECASE | re.ASCII),
)

LIST_INDICATORS = (
    re.compile(r"^\d+\s+\d{1,2}:\d{2}", re.MULTILINE | re.ASCII),  # "3  9:45-10:30 Maths"
    re.compile(r"^[•\-*]\s+\d{1,2}:\d{2}", re.MULTILINE | re.ASCII),  # "- 9:00 Register"
    re.compile(r"^\d+\.\s+", re.MULTILINE | re.ASCII),
    re.compile(r"^Daily Schedule", re.IGNORECASE | re.MULTILINE),
)

METADATA_INDICATORS = (
    re.compile(r"\b(?:School|Class|Term|Teacher|Week|Year|Reception):\s*\w+", re.IGNORECASE | re.ASCII),
    re.compile(rf"\b(?:{MONTH_NAMES})\s+\d{{4}}", re.IGNORECASE | re.ASCII),
)


# ─── Day / Time Conventions ───────────────────────────────────────────────────

FULL_DAY_RE = re.compile(rf"\b(?:{FULL_DAY_NAMES})\b", re.IGNORECASE | re.ASCII)
ABBREVIATED_DAY_RE = re.compile(r"\b(?:Mon|Tue|Tues|Wed|Thu|Thur|Thurs|Fri|Sat|Sun|Tu|Th)\b", re.IGNORECASE | re.ASCII)
# Isolated capital letter, not part of a longer word
SINGLE_LETTER_DAY_RE = re.compile(r"\b[MTWFS]\b(?!\w)", re.ASCII)

TIME_12_HOUR_RE = re.compile(rf"{TIME_TOKEN}\s*(?:AM|PM|a\.m\.|p\.m\.)", re.IGNORECASE | re.ASCII)
TIME_24_HOUR_RE = re.compile(r"\b(?:[01]?\d|2[0-3])[:.][0-5]\d\b", re.ASCII)
PERIOD_RE = re.compile(r"\b(?:Period|P)\s*\d+\b", re.IGNORECASE | re.ASCII)

EMBEDDED_TIME_PATTERNS = (
    re.compile(rf"{TIME_RANGE}\s+[A-Za-z]", re.ASCII),  # "1:15-2:30 Science"
    re.compile(rf"[A-Za-z]+\s+{TIME_RANGE}", re.ASCII),  # "Science 1:15-2:30"
    re.compile(r"\d{1,2}:\d{2}\s*-\s*\d{1,2}:\d{2}[APM]{2}", re.IGNORECASE | re.ASCII),  # "1:15-2:30pm"
)


# ─── Layout Classifier ────────────────────────────────────────────────────────

HORIZONTAL_DAYS_RE = re.compile(r"\b(?:Monday|Mon|M)\b.*\b(?:Tuesday|Tue|Tu)\b.*\b(?:Wednesday|Wed|W)\b", re.IGNORECASE | re.ASCII)

# Day token at line start with at least two times later on the same line
VERTICAL_DAY_ROW_RE = re.compile(
    rf"^(?:Monday|Tuesday|Wednesday|Thursday|Friday|Mon|Tue|Wed|Thu|Fri|M|Tu|W|Th|F)\b.*{TIME_TOKEN}.*{TIME_TOKEN}",
    re.IGNORECASE | re.MULTILINE | re.ASCII,
)

# Applied with .match() to each stripped line
DAY_LINE_START_RE = re.compile(
    r"(?:Monday|Tuesday|Wednesday|Thursday|Friday|Mon|Tue|Tues|Wed|Thu|Thur|Thurs|Fri|M\s|Tu\s|W\s|Th\s|F\s)",
    re.IGNORECASE,
)

DAILY_SCHEDULE_HEADING_RE = re.compile(r"Daily Schedule", re.IGNORECASE)
NUMBERED_TIME_LINE_RE = re.compile(r"^\d+\s+\d{1,2}:\d{2}", re.MULTILINE | re.ASCII)

# Column headings of an early-years timetable whose activity columns are fixed
FIXED_COLUMN_ACTIVITIES = (
    re.compile(r"Reading.*and.*register", re.IGNORECASE),
    re.compile(r"Story.*time", re.IGNORECASE),
    re.compile(r"Indoor.*continuous.*provision", re.IGNORECASE),
    re.compile(r"Outside.*Play", re.IGNORECASE),
    re.compile(r"Continuous.*provision", re.IGNORECASE),
)


# ─── Common Activities ────────────────────────────────────────────────────────

# (every-match patterns, at-most-once patterns) per activity.  Counts are summed
# across alternatives, so "Storytime" scores under two patterns.
REGISTRATION_PATTERNS = (
    (
        re.compile(r"\bRegister\b", re.IGNORECASE | re.ASCII),
        re.compile(r"\bRegistration\b", re.IGNORECASE | re.ASCII),
        re.compile(r"\bReg\b(?!\w)", re.IGNORECASE | re.ASCII),
    ),
    (),
)

BREAK_PATTERNS = (
    (
        re.compile(r"\bBreak\b", re.IGNORECASE | re.ASCII),
        re.compile(r"\bRecess\b", re.IGNORECASE | re.ASCII),
        re.compile(r"\bMorning\s+Break", re.IGNORECASE | re.ASCII),
        re.compile(r"\bB\s+R\s+E\s+A\s+K", re.IGNORECASE | re.ASCII),  # letters split by OCR
    ),
    # One letter per grid cell along a row
    (re.compile(r"\bB\b.*\bR\b.*\bE\b.*\bA\b.*\bK\b", re.IGNORECASE | re.ASCII),),
)

LUNCH_PATTERNS = (
    (
        re.compile(r"\bLunch\b", re.IGNORECASE | re.ASCII),
        re.compile(r"\bL\s+U\s+N\s+C\s+H", re.IGNORECASE | re.ASCII),
    ),
    (re.compile(r"\bL\b.*\bU\b.*\bN\b.*\bC\b.*\bH\b", re.IGNORECASE | re.ASCII),),
)

STORYTIME_PATTERNS = (
    (
        re.compile(r"\bStory\s*time\b", re.IGNORECASE | re.ASCII),
        re.compile(r"\bStorytime\b", re.IGNORECASE | re.ASCII),
        re.compile(r"\bStory\b", re.IGNORECASE | re.ASCII),
        re.compile(r"\bTTRS.*Story", re.IGNORECASE | re.ASCII),
    ),
    (),
)

ASSEMBLY_PATTERNS = (
    (
        re.compile(r"\bAssembly\b", re.IGNORECASE | re.ASCII),
        re.compile(r"\bKS[12]\s+Assembly", re.IGNORECASE | re.ASCII),
    ),
    (),
)

"""Recurring-activity detection and the registration/break/lunch/story routine check.

Each activity type has an ordered list of alternative patterns (canonical
word, synonyms, OCR letter-spread forms).  Counts are summed across all
alternatives, so overlapping patterns count the same word more than once;
the counts are evidence for the downstream prompt, not a tally of sessions.
"""

import re

from timetable_prep.detection.patterns import (
    ASSEMBLY_PATTERNS,
    BREAK_PATTERNS,
    LUNCH_PATTERNS,
    REGISTRATION_PATTERNS,
    STORYTIME_PATTERNS,
)
from timetable_prep.detection.schema import ActivityType, CommonActivity

# (type, label, (every-match patterns, at-most-once patterns)) in emission order
ACTIVITY_RULES = (
    (ActivityType.REGISTRATION, "Register/Registration", REGISTRATION_PATTERNS),
    (ActivityType.BREAK, "Break/Recess", BREAK_PATTERNS),
    (ActivityType.LUNCH, "Lunch", LUNCH_PATTERNS),
    (ActivityType.STORYTIME, "Story time/Story", STORYTIME_PATTERNS),
    (ActivityType.ASSEMBLY, "Assembly", ASSEMBLY_PATTERNS),
)

# Activities making up the daily routine, and how many must be present
ROUTINE_ACTIVITIES = frozenset(
    {
        ActivityType.REGISTRATION,
        ActivityType.BREAK,
        ActivityType.LUNCH,
        ActivityType.STORYTIME,
    }
)
MIN_ROUTINE_ACTIVITIES = 3


def count_occurrences(text: str, every_match: tuple[re.Pattern, ...], at_most_once: tuple[re.Pattern, ...]) -> int:
    """Sum matches of every alternative pattern; grid-spread patterns add at most 1 each."""
    total = sum(len(pattern.findall(text)) for pattern in every_match)
    total += sum(1 for pattern in at_most_once if pattern.search(text))
    return total


def detect_common_activities(text: str) -> tuple[CommonActivity, ...]:
    """Return the recurring activities present in *text*, in canonical order."""
    activities = []
    for activity_type, label, (every_match, at_most_once) in ACTIVITY_RULES:
        occurrences = count_occurrences(text, every_match, at_most_once)
        if occurrences > 0:
            activities.append(CommonActivity(type=activity_type, pattern=label, occurrences=occurrences))
    return tuple(activities)


def detect_sequential_pattern(activities: tuple[CommonActivity, ...]) -> bool:
    """Return True if at least 3 of registration, break, lunch and story time are present.

    Only presence is checked.  The order in which the activities appear in
    the text is not considered.
    """
    present = {activity.type for activity in activities} & ROUTINE_ACTIVITIES
    return len(present) >= MIN_ROUTINE_ACTIVITIES

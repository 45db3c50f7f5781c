"""Top-level timetable format classification.

Counts how many grid indicators match, checks for any list or metadata
indicator, maps those to a format type and confidence through
``score_indicators``, then runs the layout, convention, activity and
embedded-time detectors to assemble one ``FormatDetectionResult``.
"""

import logging

from timetable_prep.detection.activities import detect_common_activities, detect_sequential_pattern
from timetable_prep.detection.conventions import detect_day_format, detect_embedded_times, detect_time_format
from timetable_prep.detection.layout import detect_layout_type
from timetable_prep.detection.patterns import GRID_INDICATORS, LIST_INDICATORS, METADATA_INDICATORS
from timetable_prep.detection.schema import FormatDetectionResult, FormatType

logger = logging.getLogger(__name__)

# ─── Scoring Policy ──────────────────────────────────────────────────────────

STRONG_GRID_INDICATORS = 3
MODERATE_GRID_INDICATORS = 2

STRONG_GRID_CONFIDENCE = 0.9
MODERATE_GRID_CONFIDENCE = 0.8
WEAK_GRID_CONFIDENCE = 0.7
MIXED_CONFIDENCE = 0.7
LIST_CONFIDENCE = 0.8
UNKNOWN_CONFIDENCE = 0.5

# Header metadata suggests a structured document
METADATA_BOOST = 0.1
MAX_CONFIDENCE = 1.0


def count_grid_indicators(text: str) -> int:
    """Return how many distinct grid indicators match (each counts once)."""
    return sum(1 for pattern in GRID_INDICATORS if pattern.search(text))


def has_list_indicators(text: str) -> bool:
    return any(pattern.search(text) for pattern in LIST_INDICATORS)


def has_metadata(text: str) -> bool:
    """Return True for header cues like 'Class: 2EJ' or a 'January 2025' date."""
    return any(pattern.search(text) for pattern in METADATA_INDICATORS)


def score_indicators(grid_count: int, has_list: bool, has_meta: bool) -> tuple[FormatType, float]:
    """Map indicator evidence to a format type and a confidence in [0, 1]."""
    if grid_count >= 1 and has_list:
        format_type, confidence = FormatType.MIXED, MIXED_CONFIDENCE
    elif grid_count >= STRONG_GRID_INDICATORS:
        format_type, confidence = FormatType.GRID, STRONG_GRID_CONFIDENCE
    elif grid_count == MODERATE_GRID_INDICATORS:
        format_type, confidence = FormatType.GRID, MODERATE_GRID_CONFIDENCE
    elif grid_count == 1:
        format_type, confidence = FormatType.GRID, WEAK_GRID_CONFIDENCE
    elif has_list:
        format_type, confidence = FormatType.LIST, LIST_CONFIDENCE
    else:
        format_type, confidence = FormatType.UNKNOWN, UNKNOWN_CONFIDENCE

    if has_meta and format_type is not FormatType.UNKNOWN:
        # Round so that 0.7 + 0.1 reports as 0.8
        confidence = round(min(confidence + METADATA_BOOST, MAX_CONFIDENCE), 2)

    return format_type, confidence


def detect_format(text: str) -> FormatDetectionResult:
    """Classify the structure of cleaned timetable text."""
    grid_count = count_grid_indicators(text)
    has_list = has_list_indicators(text)
    has_meta = has_metadata(text)
    logger.debug("Indicators: grid=%d list=%s metadata=%s", grid_count, has_list, has_meta)

    format_type, confidence = score_indicators(grid_count, has_list, has_meta)

    activities = detect_common_activities(text)
    return FormatDetectionResult(
        format_type=format_type,
        layout_type=detect_layout_type(text),
        has_metadata=has_meta,
        day_format=detect_day_format(text),
        time_format=detect_time_format(text),
        confidence=confidence,
        common_activities=activities,
        has_sequential_pattern=detect_sequential_pattern(activities),
        has_embedded_times=detect_embedded_times(text),
    )

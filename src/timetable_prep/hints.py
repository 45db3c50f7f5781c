"""Render a detection record as a text header for the downstream extraction prompt.

The section markers and field order are relied on by prompt consumers, so
the layout here is fixed.
"""

from timetable_prep.detection.schema import FormatDetectionResult

DETECTION_HEADER = "[TIMETABLE FORMAT DETECTION]"
ACTIVITIES_HEADER = "[COMMON ACTIVITIES DETECTED]"
SEQUENCE_HEADER = "[SEQUENTIAL PATTERN]"
TEXT_MARKER = "[EXTRACTED TEXT]"

ROUTINE_LINES = (
    "This timetable follows the common daily pattern:",
    "Registration → Break → Lunch → Story time",
    "Use this pattern to help structure and validate the extracted schedule.",
)


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def add_format_hints(text: str, format_result: FormatDetectionResult) -> str:
    """Prefix *text* with a human-readable summary of *format_result*."""
    lines = [DETECTION_HEADER, f"Format Type: {format_result.format_type.value}"]
    if format_result.layout_type is not None:
        lines.append(f"Layout Type: {format_result.layout_type.value}")
    lines += [
        f"Day Format: {format_result.day_format.value}",
        f"Time Format: {format_result.time_format.value}",
        f"Has Metadata: {_yes_no(format_result.has_metadata)}",
        f"Has Embedded Times: {_yes_no(format_result.has_embedded_times)}",
        f"Confidence: {format_result.confidence * 100:.0f}%",
    ]

    if format_result.common_activities:
        lines += ["", ACTIVITIES_HEADER]
        for activity in format_result.common_activities:
            lines.append(f"- {activity.type.value.capitalize()}: {activity.occurrences} occurrence(s)")

    if format_result.has_sequential_pattern:
        lines += ["", SEQUENCE_HEADER, *ROUTINE_LINES]

    lines += ["", TEXT_MARKER]
    return "\n".join(lines) + "\n" + text

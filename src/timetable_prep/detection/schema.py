"""Pydantic models for the timetable format-detection record.

``FormatDetectionResult`` is created fresh by ``detect_format`` for every call
and never mutated afterwards (all models are frozen).  Each enumerated field
has its own ``str`` enum so the record has a fixed shape.  Field names are
snake_case in Python and camelCase when serialised, which is the shape the
downstream extraction service logs alongside its results.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class FormatType(str, Enum):
    """Coarse structural classification of a schedule document."""

    GRID = "grid"
    LIST = "list"
    MIXED = "mixed"
    UNKNOWN = "unknown"


class LayoutType(str, Enum):
    """How days and times are arranged within a grid-like document."""

    HORIZONTAL_DAYS = "horizontal-days"
    VERTICAL_DAYS = "vertical-days"
    DAILY_SCHEDULES = "daily-schedules"
    FIXED_COLUMNS = "fixed-columns"


class DayFormat(str, Enum):
    FULL = "full"
    ABBREVIATED = "abbreviated"
    SINGLE = "single"
    MIXED = "mixed"


class TimeFormat(str, Enum):
    TWELVE_HOUR = "12hour"
    TWENTY_FOUR_HOUR = "24hour"
    PERIOD = "period"
    MIXED = "mixed"


class ActivityType(str, Enum):
    """Recurring activities of a school day, in canonical emission order."""

    REGISTRATION = "registration"
    BREAK = "break"
    LUNCH = "lunch"
    STORYTIME = "storytime"
    ASSEMBLY = "assembly"


_RECORD_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class CommonActivity(BaseModel):
    """An activity found in the text and how many times its patterns matched."""

    model_config = _RECORD_CONFIG

    type: ActivityType
    pattern: str
    occurrences: int = Field(gt=0)


class FormatDetectionResult(BaseModel):
    """Structure inferred from a timetable's recovered text.

    ``layout_type`` is None when the layout classifier recognised nothing;
    that is a normal outcome, not an error.  ``common_activities`` never holds
    a zero-count entry (enforced by ``CommonActivity.occurrences``).
    """

    model_config = _RECORD_CONFIG

    format_type: FormatType
    layout_type: LayoutType | None = None
    has_metadata: bool
    day_format: DayFormat
    time_format: TimeFormat
    confidence: float = Field(ge=0.0, le=1.0)
    common_activities: tuple[CommonActivity, ...] = ()
    has_sequential_pattern: bool
    has_embedded_times: bool

    @model_validator(mode="after")
    def validate_unique_activities(self) -> "FormatDetectionResult":
        """Ensure each activity type appears at most once."""
        types = [activity.type for activity in self.common_activities]
        if len(types) != len(set(types)):
            raise ValueError(f"Duplicate activity types in {[t.value for t in types]}")
        return self

    def to_json_dict(self) -> dict:
        """Return the record as a JSON-ready dict with camelCase keys and enum values.

        An unset ``layoutType`` is omitted rather than emitted as null.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PreprocessResult(BaseModel):
    """Text to hand downstream plus the detection record it was derived from."""

    model_config = _RECORD_CONFIG

    processed_text: str
    format: FormatDetectionResult

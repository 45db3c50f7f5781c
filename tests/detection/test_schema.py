"""Unit tests for the detection record models and their validation."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError

from timetable_prep.detection.schema import (
    ActivityType,
    CommonActivity,
    DayFormat,
    FormatDetectionResult,
    FormatType,
    LayoutType,
    TimeFormat,
)


def make_result(**overrides) -> FormatDetectionResult:
    """Build a valid result, overriding any field by its Python name."""
    fields = {
        "format_type": FormatType.GRID,
        "has_metadata": True,
        "day_format": DayFormat.FULL,
        "time_format": TimeFormat.TWENTY_FOUR_HOUR,
        "confidence": 0.9,
        "has_sequential_pattern": False,
        "has_embedded_times": False,
    }
    fields.update(overrides)
    return FormatDetectionResult(**fields)


class TestCommonActivity:

    def test_zero_occurrences_rejected(self):
        with pytest.raises(ValidationError):
            CommonActivity(type=ActivityType.LUNCH, pattern="Lunch", occurrences=0)

    def test_type_from_string_value(self):
        activity = CommonActivity(type="storytime", pattern="Story time/Story", occurrences=2)
        assert activity.type is ActivityType.STORYTIME


class TestFormatDetectionResult:

    def test_layout_defaults_to_none(self):
        assert make_result().layout_type is None

    def test_confidence_above_one_rejected(self):
        with pytest.raises(ValidationError):
            make_result(confidence=1.5)

    def test_negative_confidence_rejected(self):
        with pytest.raises(ValidationError):
            make_result(confidence=-0.1)

    def test_duplicate_activity_types_rejected(self):
        lunch = CommonActivity(type=ActivityType.LUNCH, pattern="Lunch", occurrences=1)
        with pytest.raises(ValidationError):
            make_result(common_activities=(lunch, lunch))

    def test_frozen(self):
        result = make_result()
        with pytest.raises(ValidationError):
            result.confidence = 0.1

    def test_equal_records_compare_equal(self):
        assert make_result() == make_result()

    def test_populate_by_alias(self):
        result = FormatDetectionResult.model_validate(
            {
                "formatType": "list",
                "layoutType": "daily-schedules",
                "hasMetadata": False,
                "dayFormat": "mixed",
                "timeFormat": "mixed",
                "confidence": 0.8,
                "commonActivities": [],
                "hasSequentialPattern": False,
                "hasEmbeddedTimes": True,
            }
        )
        assert result.format_type is FormatType.LIST
        assert result.layout_type is LayoutType.DAILY_SCHEDULES


class TestToJsonDict:

    def test_camel_case_keys_and_enum_values(self):
        lunch = CommonActivity(type=ActivityType.LUNCH, pattern="Lunch", occurrences=5)
        data = make_result(layout_type=LayoutType.VERTICAL_DAYS, common_activities=(lunch,)).to_json_dict()
        assert data == {
            "formatType": "grid",
            "layoutType": "vertical-days",
            "hasMetadata": True,
            "dayFormat": "full",
            "timeFormat": "24hour",
            "confidence": 0.9,
            "commonActivities": [{"type": "lunch", "pattern": "Lunch", "occurrences": 5}],
            "hasSequentialPattern": False,
            "hasEmbeddedTimes": False,
        }

    def test_unset_layout_omitted(self):
        assert "layoutType" not in make_result().to_json_dict()

"""Unit tests for the preprocess() pipeline and the command-line entry point."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import json

import pytest

from timetable_prep import clean_text, detect_format, preprocess
from timetable_prep.config import ADD_HINTS_VAR, LOG_LEVEL_VAR
from timetable_prep.detection.schema import FormatType, PreprocessResult
from timetable_prep.hints import DETECTION_HEADER, TEXT_MARKER
from timetable_prep.pipeline import main

RAW_GRID = (
    "Class: 4M\r\n"
    "\r\n"
    "\r\n"
    "\r\n"
    "Mon    8.45-8.55  Register   8.55-10.10  English   10.30-11.40  Maths\r\n"
    "Tue    8.45-8.55  Register   8.55-10.10  Reading   10.30-11.40  Maths\r\n"
    "Wed    8.45-8.55  Register   8.55-10.10  English   10.30-11.40  Assembly\r\n"
    "7\r\n"
)


# ===========================================================================
# preprocess tests
# ===========================================================================


class TestPreprocess:

    def test_returns_text_and_format(self):
        result = preprocess(RAW_GRID, add_hints=True)
        assert isinstance(result, PreprocessResult)
        assert result.format.format_type is FormatType.GRID

    def test_hinted_text_wraps_cleaned_text(self):
        result = preprocess(RAW_GRID, add_hints=True)
        assert result.processed_text.startswith(DETECTION_HEADER)
        assert result.processed_text.endswith(TEXT_MARKER + "\n" + clean_text(RAW_GRID))

    def test_without_hints_returns_cleaned_text(self):
        result = preprocess(RAW_GRID, add_hints=False)
        assert result.processed_text == clean_text(RAW_GRID)

    def test_format_independent_of_hints(self):
        assert preprocess(RAW_GRID, add_hints=True).format == preprocess(RAW_GRID, add_hints=False).format

    def test_format_detected_on_cleaned_text(self):
        assert preprocess(RAW_GRID, add_hints=False).format == detect_format(clean_text(RAW_GRID))

    def test_default_adds_hints(self):
        assert preprocess(RAW_GRID).processed_text.startswith(DETECTION_HEADER)

    def test_default_ignores_environment(self, monkeypatch):
        monkeypatch.setenv(ADD_HINTS_VAR, "false")
        assert preprocess(RAW_GRID).processed_text.startswith(DETECTION_HEADER)

    def test_invalid_hint_setting_does_not_fail(self, monkeypatch):
        monkeypatch.setenv(ADD_HINTS_VAR, "sometimes")
        result = preprocess("Monday 9:00 Maths")
        assert result.processed_text.startswith(DETECTION_HEADER)
        assert result.processed_text.endswith("Monday 9:00 Maths")

    def test_empty_input(self):
        result = preprocess("", add_hints=False)
        assert result.processed_text == ""
        assert result.format.format_type is FormatType.UNKNOWN


# ===========================================================================
# Command-line tests
# ===========================================================================


class TestMain:

    @pytest.fixture
    def timetable_file(self, tmp_path):
        path = tmp_path / "timetable.txt"
        path.write_text(RAW_GRID, encoding="utf-8")
        return path

    def test_prints_hinted_text(self, timetable_file, capsys):
        assert main([str(timetable_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith(DETECTION_HEADER)
        assert TEXT_MARKER in out

    def test_no_hints(self, timetable_file, capsys):
        main([str(timetable_file), "--no-hints"])
        assert capsys.readouterr().out == clean_text(RAW_GRID) + "\n"

    def test_json_output(self, timetable_file, capsys):
        main([str(timetable_file), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["formatType"] == "grid"
        assert data["hasMetadata"] is True

    def test_missing_file_exits_with_usage_error(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "missing.txt")])
        assert excinfo.value.code == 2

    def test_hint_setting_from_environment(self, timetable_file, monkeypatch, capsys):
        monkeypatch.setenv(ADD_HINTS_VAR, "false")
        main([str(timetable_file)])
        assert capsys.readouterr().out == clean_text(RAW_GRID) + "\n"

    def test_bad_hint_setting_exits_with_usage_error(self, timetable_file, monkeypatch):
        monkeypatch.setenv(ADD_HINTS_VAR, "sometimes")
        with pytest.raises(SystemExit) as excinfo:
            main([str(timetable_file)])
        assert excinfo.value.code == 2

    def test_bad_log_level_exits_with_usage_error(self, timetable_file, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_VAR, "LOUD")
        with pytest.raises(SystemExit) as excinfo:
            main([str(timetable_file)])
        assert excinfo.value.code == 2

"""Timetable text preprocessing: cleanup and structural format detection.

Subpackages:
  text_cleaning  -- OCR whitespace/punctuation normalisation
  detection      -- format, layout, convention and activity detectors

Modules:
  hints     -- detection header for the downstream extraction prompt
  pipeline  -- preprocess() entry point and command-line interface
  config    -- environment-driven defaults
"""

from timetable_prep.detection.classify import detect_format
from timetable_prep.detection.schema import FormatDetectionResult, PreprocessResult
from timetable_prep.hints import add_format_hints
from timetable_prep.pipeline import preprocess
from timetable_prep.text_cleaning.clean import clean_text

__all__ = [
    "FormatDetectionResult",
    "PreprocessResult",
    "add_format_hints",
    "clean_text",
    "detect_format",
    "preprocess",
]

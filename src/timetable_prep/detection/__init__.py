"""Timetable format detection.

Submodules:
  patterns     -- compiled regex patterns and indicator tables
  schema       -- FormatDetectionResult and its enums (Pydantic)
  conventions  -- day-name and time-notation conventions, embedded time ranges
  activities   -- recurring activities and the daily-routine check
  layout       -- grid sub-layout classification
  classify     -- detect_format() entry point and the scoring policy
"""

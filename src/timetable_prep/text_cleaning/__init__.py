"""Text normalisation for OCR-recovered timetable text."""

"""Normalise raw text recovered from a scanned timetable.

Steps, in order:
  1. line breaks      -- "\\r\\n" and "\\r" become "\\n"
  2. vertical bars    -- box-drawing and full-width bars become "|"
  3. dashes           -- em/en dashes and runs of hyphens become a single "-"
  4. whitespace       -- runs of spaces/tabs inside a line become one space
  5. page numbers     -- lines holding only a number are blanked
  6. blank lines      -- 3+ consecutive line breaks become 2

Line breaks survive step 4, so the line-anchored detectors downstream still
see one timetable row per line.  The function is idempotent.
"""

import re

# Vertical-bar glyphs produced by OCR of table borders
BAR_RE = re.compile(r"[|│┃¦｜]")

# A single em/en dash, or any run of 2+ dash glyphs
DASH_RE = re.compile(r"[—–-]{2,}|[—–]")

# Whitespace other than the line break itself
INLINE_WHITESPACE_RE = re.compile(r"[^\S\n]+")

# Page-number artifact, e.g. "12" alone on a line
PAGE_NUMBER_LINE_RE = re.compile(r"^\d+$", re.ASCII)

BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalise_line(line: str) -> str:
    """Collapse whitespace in a single line, trim it, and drop page numbers."""
    line = INLINE_WHITESPACE_RE.sub(" ", line).strip()
    if PAGE_NUMBER_LINE_RE.match(line):
        return ""
    return line


def clean_text(text: str) -> str:
    """Return *text* with OCR whitespace and punctuation noise removed."""
    cleaned = text.replace("\r\n", "\n").replace("\r", "\n")

    # Punctuation artifacts
    cleaned = BAR_RE.sub("|", cleaned)
    cleaned = DASH_RE.sub("-", cleaned)

    # Line-by-line whitespace and page numbers
    cleaned = "\n".join(normalise_line(line) for line in cleaned.split("\n"))

    cleaned = BLANK_RUN_RE.sub("\n\n", cleaned)
    return cleaned.strip()

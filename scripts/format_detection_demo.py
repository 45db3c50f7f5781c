"""Run format detection over sample timetable texts and log what was found.

Samples cover the layouts seen in uploaded timetables:
- Grid with full day names and a class/term/teacher header
- Numbered daily schedule
- Reception grid with single-letter days and a daily-routine preamble
- Grid with three-letter day abbreviations

Usage:
    source .venv/bin/activate
    python scripts/format_detection_demo.py
"""

import logging

from timetable_prep import clean_text, preprocess

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

SAMPLES = {
    "Grid-based timetable (full day names)": """
Little Thurrock Primary School
Class: 2EJ    Term: Autumn 2 2024    Teacher: Miss Joynes

                8:30-9:00    9:30-10:30    10:30-11:30    11:30-12:30    1:15-2:00    2:00-3:00
Monday          Register     Maths         English         Science        Lunch        Computing
Tuesday         Register     English       Maths           History        Lunch        Art
Wednesday       Register     Maths         Science         Geography      Lunch        PE
Thursday        Register     English       PE              Music          Lunch        History
Friday          Register     Maths         Reading         Computing      Lunch        Assembly
""",
    "List-based schedule": """
Daily Schedule - Monday, Tuesday, Thursday

1  8:30         Students are allowed inside
2  9:00-9:45    Morning Work
3  9:45-10:30   Daily S-Station 1
4  10:30-11:15  Morning Meeting
5  11:15-11:30  Morning Recess
6  11:30-12:15  Math
7  12:15-1:00   Lunch
8  1:00-1:45    Reading Workshop
9  1:45-2:30    Science/Health/Social Studies
10 2:30-3:00    Daily S-Station 2
""",
    "Mixed format timetable (single letter days)": """
Reception timetable January 2025

Daily routine
8.40 - Reading folder and register
9.00 - Story time and tidy work

        9.15-10.45          11.00-11.30       1.00    1.15         1.30-2.30
M       Readers             Outside Play      Lunch   Jigsaw       Word Time
Tu      Jo readers          PHSE              Lunch   RE           Reading
W       Readers             Outdoor learning  Lunch   Yoga         Wand time
Th      Maths task          PE                Lunch   Penpals      Reading
F       Maths task          PE                Lunch   Computing    Word Time
""",
    "Grid with abbreviated days (3-letter)": """
4M Class Timetable

        8.45-8.55    8.55-10.10           10.30-11.40    11.40-12.30    1.40-2.30         2.30-3.15
Mon     Register     Spellings/English    Maths          Topic          Swimming          TTRS/Story
Tue     Register     Comprehension        Maths          PSHE           PE                TTRS/Story
Wed     Register     English              Maths          Music          Science           Assembly
Thu     Register     Comprehension        Maths          RE             Art/DT            TTRS/Story
Fri     Register     Spelling test        Maths          Spanish        Computing         Story
""",
}


def describe(name: str, text: str) -> None:
    """Log the detection record and cleaning effect for one sample."""
    result = preprocess(text, add_hints=True)
    fmt = result.format
    logger.info("=== %s ===", name)
    logger.info("Format type:   %s", fmt.format_type.value)
    logger.info("Layout type:   %s", fmt.layout_type.value if fmt.layout_type else "-")
    logger.info("Has metadata:  %s", "Yes" if fmt.has_metadata else "No")
    logger.info("Day format:    %s", fmt.day_format.value)
    logger.info("Time format:   %s", fmt.time_format.value)
    logger.info("Confidence:    %.0f%%", fmt.confidence * 100)
    for activity in fmt.common_activities:
        logger.info("Activity:      %s x%d", activity.type.value, activity.occurrences)

    cleaned = clean_text(text)
    logger.info("Cleaning removed %d of %d chars", len(text) - len(cleaned), len(text))


def main():
    for name, text in SAMPLES.items():
        describe(name, text)


if __name__ == "__main__":
    main()

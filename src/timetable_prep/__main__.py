"""Allow ``python -m timetable_prep``."""

import sys

from timetable_prep.pipeline import main

sys.exit(main())

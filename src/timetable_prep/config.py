"""Runtime configuration for the timetable preprocessing engine.

Values come from environment variables, with a ``.env`` file at the project
root loaded first:
  TIMETABLE_PREP_ADD_HINTS   -- command line prepends the detection header (default: true)
  TIMETABLE_PREP_LOG_LEVEL   -- logging level for the command-line entry point (default: INFO)
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

ADD_HINTS_VAR = "TIMETABLE_PREP_ADD_HINTS"
LOG_LEVEL_VAR = "TIMETABLE_PREP_LOG_LEVEL"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def parse_bool(name: str, value: str) -> bool:
    """Parse a boolean environment value, raising ValueError naming *name* if invalid."""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}, got {value!r}")


def add_hints_default() -> bool:
    """Whether the command line prepends format hints when --no-hints is not given."""
    value = os.getenv(ADD_HINTS_VAR)
    if value is None or not value.strip():
        return True
    return parse_bool(ADD_HINTS_VAR, value)


def log_level() -> int:
    """Return the configured logging level as an int."""
    name = os.getenv(LOG_LEVEL_VAR, "INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_VAR} must be a logging level name, got {name!r}")
    return level

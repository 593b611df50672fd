"""Treasurehunt constants: filesystem layout, record widths, and exit codes."""

from __future__ import annotations

from enum import IntEnum

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1


# ---------------------------------------------------------------------------
# Filesystem layout
# ---------------------------------------------------------------------------

TREASURE_FILENAME = "treasures.dat"
LOG_FILENAME = "logged_hunt"
SYMLINK_PREFIX = "logged_hunt-"
TEMP_PREFIX = "temp_"

HUNT_DIR_MODE = 0o755
FILE_MODE = 0o644

# ---------------------------------------------------------------------------
# Record layout
# ---------------------------------------------------------------------------

USERNAME_WIDTH = 50  # 49 usable bytes + NUL
CLUE_WIDTH = 256  # 255 usable bytes + NUL

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_LIMIT = 50

"""
Audit log — append-only text history of operations on one hunt.

Every mutating or reading operation appends one line to
``<hunt>/logged_hunt``::

    [2024-05-01 12:00:00] Added treasure 1 by alice

Entries are never modified or reordered; the file grows monotonically.

Usage::

    audit = AuditLog(config.log_path("pirate"))
    audit.record("Listed all treasures")

    for line in audit.tail(n=20):
        print(line)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

from treasurehunt.core.constants import DEFAULT_LOG_LIMIT, TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)


def format_entry(text: str, when: datetime | None = None) -> str:
    """Render one audit line, newline included, stamped with local time."""
    stamp = (when or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return f"[{stamp}] {text}\n"


class AuditLog:
    """
    Append-only writer and reader for a hunt's audit log.

    Each entry goes out in a single append write. No locking: concurrent
    processes rely on the OS for atomicity of small appends.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def record(self, text: str) -> bool:
        """Append one entry. Returns False if the log could not be written."""
        try:
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(format_entry(text))
        except OSError as exc:
            # A lost audit line never fails the operation that produced it
            logger.error("Failed to write to log file %s: %s", self.path, exc.strerror or exc)
            return False
        return True

    def tail(self, n: int = DEFAULT_LOG_LIMIT) -> list[str]:
        """Return the last ``n`` entries (oldest first), without newlines."""
        if n <= 0:
            return []
        return list(self)[-n:]

    def __iter__(self) -> Iterator[str]:
        """Iterate over all entries (oldest first)."""
        if not self.path.exists():
            return
        try:
            with self.path.open("r", encoding="utf-8", errors="replace") as fh:
                for line in fh:
                    line = line.rstrip("\n")
                    if line:
                        yield line
        except OSError as exc:
            logger.error("Cannot read log file %s: %s", self.path, exc.strerror or exc)

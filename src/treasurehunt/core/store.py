"""
Record store — CRUD over a hunt's flat ``treasures.dat`` file.

There is no index. Counting, listing and lookup are linear scans over
fixed-size records; deletion rewrites the file without the target record
into ``temp_treasures.dat`` and renames it over the original.

Ids are assigned as ``count of complete records + 1``. After a deletion
this can hand out an id that is still in use further down the file;
lookups and deletions act on the first matching record only.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime

from treasurehunt.core.config import HuntConfig
from treasurehunt.core.exceptions import StoreError, TreasureNotFoundError
from treasurehunt.core.hunt import HuntManager
from treasurehunt.core.records import RECORD_SIZE, Treasure, iter_records, read_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordFileInfo:
    size: int
    modified: datetime


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


class TreasureStore:
    """
    Treasure records of all hunts under one base directory.

    Usage::

        store = TreasureStore(HuntConfig())
        created = store.hunts.ensure("pirate")
        saved = store.add("pirate", Treasure(username="alice", value=100))
        store.remove("pirate", saved.id)
    """

    def __init__(self, config: HuntConfig) -> None:
        self.config = config
        self.hunts = HuntManager(config)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def next_id(self, hunt_id: str) -> int:
        path = self.config.treasure_path(hunt_id)
        try:
            with path.open("rb") as fh:
                count = sum(1 for _ in iter_records(fh))
        except OSError:
            return 1
        return count + 1

    def file_info(self, hunt_id: str) -> RecordFileInfo | None:
        """Size and mtime of the records file, or None if it does not exist."""
        self.hunts.require(hunt_id)
        path = self.config.treasure_path(hunt_id)
        try:
            st = path.stat()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StoreError(f"Failed to get file information: {_reason(exc)}") from exc
        return RecordFileInfo(size=st.st_size, modified=datetime.fromtimestamp(st.st_mtime))

    def iter_treasures(self, hunt_id: str) -> Iterator[Treasure]:
        """
        Yield every complete record in file order.

        Yields nothing when the records file is absent.
        """
        self.hunts.require(hunt_id)
        path = self.config.treasure_path(hunt_id)
        try:
            fh = path.open("rb")
        except FileNotFoundError:
            return
        except OSError as exc:
            raise StoreError(f"Failed to open treasure file: {_reason(exc)}") from exc
        with fh:
            for raw in iter_records(fh):
                yield Treasure.unpack(raw)

    def list_treasures(self, hunt_id: str) -> list[Treasure]:
        treasures = list(self.iter_treasures(hunt_id))
        self.hunts.audit(hunt_id).record("Listed all treasures")
        return treasures

    def get(self, hunt_id: str, treasure_id: int) -> Treasure:
        """
        Return the first record whose id matches.

        Raises:
            HuntNotFoundError: the hunt does not exist.
            StoreError: the records file cannot be opened (absent included).
            TreasureNotFoundError: no record carries ``treasure_id``.
        """
        self.hunts.require(hunt_id)
        path = self.config.treasure_path(hunt_id)
        try:
            with path.open("rb") as fh:
                for raw in iter_records(fh):
                    if read_id(raw) == treasure_id:
                        found = Treasure.unpack(raw)
                        break
                else:
                    found = None
        except OSError as exc:
            raise StoreError(f"Failed to open treasure file: {_reason(exc)}") from exc

        if found is None:
            raise TreasureNotFoundError(hunt_id, treasure_id)
        self.hunts.audit(hunt_id).record(f"Viewed treasure {treasure_id}")
        return found

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def add(self, hunt_id: str, treasure: Treasure) -> Treasure:
        """
        Append ``treasure`` under the next id and return the stored copy.

        The hunt is created first if needed. A short or failed write is
        rolled back so no partial record is left behind.
        """
        self.hunts.ensure(hunt_id)
        path = self.config.treasure_path(hunt_id)
        try:
            fh = open(path, "ab", buffering=0)
        except OSError as exc:
            raise StoreError(f"Failed to open treasure file: {_reason(exc)}") from exc

        with fh:
            stored = treasure.model_copy(update={"id": self.next_id(hunt_id)})
            start = fh.seek(0, os.SEEK_END)
            try:
                written = fh.write(stored.pack())
            except OSError as exc:
                self._rollback(fh, start)
                raise StoreError(f"Failed to write treasure: {_reason(exc)}") from exc
            if written != RECORD_SIZE:
                self._rollback(fh, start)
                raise StoreError(
                    f"Failed to write treasure: short write ({written} of {RECORD_SIZE} bytes)"
                )

        logger.debug("Appended treasure %d to %s", stored.id, path)
        self.hunts.audit(hunt_id).record(f"Added treasure {stored.id} by {stored.username}")
        return stored

    def remove(self, hunt_id: str, treasure_id: int) -> None:
        """
        Delete the first record whose id matches, preserving all others.

        The surviving records are copied into a temporary file which then
        replaces the original. On any failure, or when nothing matched, the
        temporary file is discarded and the original is left untouched.
        """
        self.hunts.require(hunt_id)
        path = self.config.treasure_path(hunt_id)
        tmp_path = self.config.temp_path(hunt_id)

        try:
            src = open(path, "rb")
        except OSError as exc:
            raise StoreError(f"Failed to open treasure file: {_reason(exc)}") from exc

        with src:
            try:
                dst = open(tmp_path, "wb")
            except OSError as exc:
                raise StoreError(f"Failed to create temporary file: {_reason(exc)}") from exc
            found = False
            try:
                with dst:
                    for raw in iter_records(src):
                        if not found and read_id(raw) == treasure_id:
                            found = True
                            continue
                        dst.write(raw)
            except OSError as exc:
                tmp_path.unlink(missing_ok=True)
                raise StoreError(f"Failed to write to temporary file: {_reason(exc)}") from exc

        if not found:
            tmp_path.unlink(missing_ok=True)
            raise TreasureNotFoundError(hunt_id, treasure_id)

        try:
            os.replace(tmp_path, path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise StoreError(f"Failed to replace treasure file: {_reason(exc)}") from exc

        logger.debug("Removed treasure %d from %s", treasure_id, path)
        self.hunts.audit(hunt_id).record(f"Removed treasure {treasure_id}")

    @staticmethod
    def _rollback(fh, size: int) -> None:
        try:
            fh.truncate(size)
        except OSError as exc:
            logger.error("Could not roll back partial record: %s", _reason(exc))

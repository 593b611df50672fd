"""
Hunt lifecycle: create, verify and destroy hunt directories.

A hunt is nothing more than a directory under the configured base
directory. Creating one also creates an empty audit log inside it and a
``logged_hunt-<id>`` symlink beside it pointing at that log. The symlink
is a best-effort convenience: failing to create or remove it is logged
and never stops the calling operation.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from treasurehunt.core.audit import AuditLog
from treasurehunt.core.config import HuntConfig
from treasurehunt.core.constants import FILE_MODE, HUNT_DIR_MODE
from treasurehunt.core.exceptions import HuntNotFoundError, HuntSetupError, StoreError

logger = logging.getLogger(__name__)


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


class HuntManager:
    """Owns the directory, log file and symlink of every hunt."""

    def __init__(self, config: HuntConfig) -> None:
        self.config = config

    def exists(self, hunt_id: str) -> bool:
        return self.config.hunt_dir(hunt_id).is_dir()

    def require(self, hunt_id: str) -> None:
        if not self.exists(hunt_id):
            raise HuntNotFoundError(hunt_id)

    def audit(self, hunt_id: str) -> AuditLog:
        return AuditLog(self.config.log_path(hunt_id))

    def ensure(self, hunt_id: str) -> bool:
        """
        Create the hunt if its directory is missing.

        Returns True when a new hunt was created. An existing directory is
        trusted as-is; a missing log or symlink is not repaired here.

        Raises:
            HuntSetupError: the directory or the initial log file could not
                be created.
        """
        if self.exists(hunt_id):
            return False

        hunt_dir = self.config.hunt_dir(hunt_id)
        try:
            hunt_dir.mkdir(mode=HUNT_DIR_MODE)
        except FileExistsError:
            pass
        except OSError as exc:
            raise HuntSetupError(f"Failed to create hunt directory: {_reason(exc)}") from exc
        logger.info("Created hunt directory %s", hunt_dir)

        log_path = self.config.log_path(hunt_id)
        try:
            log_path.touch(mode=FILE_MODE)
        except OSError as exc:
            raise HuntSetupError(f"Failed to create log file: {_reason(exc)}") from exc

        self.create_symlink(hunt_id)
        return True

    def create_symlink(self, hunt_id: str) -> bool:
        """(Re)point ``logged_hunt-<id>`` at the hunt's log. Returns success."""
        link = self.config.symlink_path(hunt_id)
        try:
            link.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Failed to remove old symbolic link %s: %s", link, _reason(exc))

        try:
            os.symlink(self.config.symlink_target(hunt_id), link)
        except OSError as exc:
            logger.warning("Failed to create symbolic link: %s", _reason(exc))
            return False
        logger.debug("Symlink %s -> %s", link, self.config.symlink_target(hunt_id))
        return True

    def remove(self, hunt_id: str) -> list[str]:
        """
        Delete the records file, log file and symlink, then the directory.

        Missing artifacts are fine. Any other per-artifact failure is logged
        and returned as a message; the remaining deletions still run.

        Raises:
            HuntNotFoundError: the hunt directory does not exist.
            StoreError: the directory itself could not be removed (it is not
                emptied recursively).
        """
        self.require(hunt_id)

        problems: list[str] = []
        artifacts: list[tuple[str, Path]] = [
            ("treasure file", self.config.treasure_path(hunt_id)),
            ("log file", self.config.log_path(hunt_id)),
            ("symlink", self.config.symlink_path(hunt_id)),
        ]
        for label, path in artifacts:
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                message = f"Failed to remove {label}: {_reason(exc)}"
                logger.error(message)
                problems.append(message)

        hunt_dir = self.config.hunt_dir(hunt_id)
        try:
            hunt_dir.rmdir()
        except OSError as exc:
            raise StoreError(f"Failed to remove hunt directory: {_reason(exc)}") from exc
        logger.info("Removed hunt directory %s", hunt_dir)
        return problems

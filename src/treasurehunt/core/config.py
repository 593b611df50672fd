"""Treasurehunt configuration: Pydantic model and path resolution."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from treasurehunt.core.constants import (
    LOG_FILENAME,
    SYMLINK_PREFIX,
    TEMP_PREFIX,
    TREASURE_FILENAME,
)


class LoggingConfig(BaseModel):
    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()


class HuntConfig(BaseModel):
    """
    Root configuration model.

    Built from defaults and command-line flags only; hunts are resolved
    relative to ``base_dir`` (the working directory unless overridden).
    """

    base_dir: Path = Field(default_factory=Path.cwd)
    treasure_filename: str = TREASURE_FILENAME
    log_filename: str = LOG_FILENAME
    symlink_prefix: str = SYMLINK_PREFIX
    temp_prefix: str = TEMP_PREFIX
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def hunt_dir(self, hunt_id: str) -> Path:
        return self.base_dir / hunt_id

    def treasure_path(self, hunt_id: str) -> Path:
        return self.hunt_dir(hunt_id) / self.treasure_filename

    def temp_path(self, hunt_id: str) -> Path:
        return self.hunt_dir(hunt_id) / f"{self.temp_prefix}{self.treasure_filename}"

    def log_path(self, hunt_id: str) -> Path:
        return self.hunt_dir(hunt_id) / self.log_filename

    def symlink_path(self, hunt_id: str) -> Path:
        return self.base_dir / f"{self.symlink_prefix}{hunt_id}"

    def symlink_target(self, hunt_id: str) -> Path:
        # Resolved relative to the directory holding the link.
        return Path(hunt_id) / self.log_filename

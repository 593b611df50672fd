"""Treasurehunt exception hierarchy."""

from __future__ import annotations


class TreasureHuntError(Exception):
    """Base exception for all treasurehunt errors."""


class HuntNotFoundError(TreasureHuntError):
    """Raised when an operation targets a hunt directory that does not exist."""

    def __init__(self, hunt_id: str) -> None:
        super().__init__(f"Hunt does not exist: {hunt_id}")
        self.hunt_id = hunt_id


class TreasureNotFoundError(TreasureHuntError):
    """Raised when no record in a hunt carries the requested id."""

    def __init__(self, hunt_id: str, treasure_id: int) -> None:
        super().__init__(f"Treasure with ID {treasure_id} not found in hunt {hunt_id}")
        self.hunt_id = hunt_id
        self.treasure_id = treasure_id


class HuntSetupError(TreasureHuntError):
    """Raised when a hunt directory or its initial log file cannot be created."""


class StoreError(TreasureHuntError):
    """Raised when reading or writing a hunt's files fails mid-operation."""


class InvalidInputError(TreasureHuntError):
    """Raised when interactive input for a new treasure is incomplete or out of range."""

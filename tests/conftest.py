"""Shared fixtures: every test gets its own base directory."""

from __future__ import annotations

from pathlib import Path

import pytest

from treasurehunt.core.config import HuntConfig
from treasurehunt.core.store import TreasureStore


@pytest.fixture
def config(tmp_path: Path) -> HuntConfig:
    return HuntConfig(base_dir=tmp_path)


@pytest.fixture
def store(config: HuntConfig) -> TreasureStore:
    return TreasureStore(config)

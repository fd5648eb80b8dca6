# tests/conftest.py

"""Shared pytest fixtures for all storefront tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_storage(tmp_path: Path) -> Generator[Path, None, None]:
    """Point the default cart database at a per-test temp file."""
    db_path = tmp_path / "storage.db"
    with patch(
        "storefront.config.settings.Settings.STORAGE_PATH", db_path
    ):
        yield db_path

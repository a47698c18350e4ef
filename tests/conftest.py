"""Shared test fixtures."""

import pytest
from pathlib import Path

from photo_diary.config import DiaryConfig


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    src = tmp_path / "source"
    src.mkdir()
    return src


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    target = tmp_path / "target"
    target.mkdir()
    return target


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    d = tmp_path / "vault"
    d.mkdir()
    return d


@pytest.fixture
def make_config(source_dir, target_dir, vault_dir):
    """Factory fixture for creating DiaryConfig with overrides."""

    def _make(**overrides):
        defaults = dict(
            source=source_dir,
            target=target_dir,
            vault=vault_dir,
            interval=60.0,
            image_prefix="sync_",
            dry_run=False,
        )
        defaults.update(overrides)
        return DiaryConfig(**defaults)

    return _make

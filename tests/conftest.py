"""Shared fixtures for ledger report tests."""

from pathlib import Path

import pytest

from ledger_reports.config import AppConfig, LoaderConfig


def write_ledger(directory: Path, name: str, *rows: str) -> Path:
    """Write ``rows`` as one ledger file (newline-terminated, like exports)."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    path = tmp_path / "tmp"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "out"


@pytest.fixture
def app_config(source_dir: Path, output_dir: Path) -> AppConfig:
    return AppConfig(
        source_dir=source_dir,
        output_dir=output_dir,
        loader=LoaderConfig(),
        log_level="INFO",
    )


@pytest.fixture
def ledger():
    """Helper writing ledger files: ``ledger(directory, name, *rows)``."""
    return write_ledger

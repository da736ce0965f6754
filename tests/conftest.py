"""
Pytest configuration for the record store.

Provides fixtures for:
- Sample records and stores built from them
- JSON data files written to a temporary directory
- Settings override and cache reset between tests
"""

from __future__ import annotations

import json
import locale
from pathlib import Path
from typing import Generator, List

import pytest

from record_store.config import Settings, get_settings
from record_store.domain.models import Record
from record_store.store import RecordStore


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """
    Clear the cached Settings around every test so env overrides take effect.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def c_collation() -> Generator[None, None, None]:
    """
    Run every test under the "C" collation and restore the previous one after.
    """
    previous = locale.setlocale(locale.LC_COLLATE)
    locale.setlocale(locale.LC_COLLATE, "C")
    yield
    locale.setlocale(locale.LC_COLLATE, previous)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings fixture with paths pointing into the test's temporary directory.
    """
    return Settings(
        data_path=str(tmp_path / "data.json"),
        output_dir=str(tmp_path / "out"),
        min_value=10.0,
        sort_locale="C",
        log_level="DEBUG",
    )


@pytest.fixture
def sample_records() -> List[Record]:
    """
    Six records with repeated names, out of name order, mixed value signs.
    """
    return [
        Record(id=1, name="charlie", value=12),
        Record(id=2, name="alpha", value=5.5),
        Record(id=3, name="bravo", value=-3),
        Record(id=4, name="alpha", value=20),
        Record(id=5, name="charlie", value=10),
        Record(id=6, name="delta", value=9),
    ]


@pytest.fixture
def store(sample_records: List[Record]) -> RecordStore:
    return RecordStore(sample_records)


def write_document(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def write_json(tmp_path: Path):
    """
    Factory writing an arbitrary JSON payload (or raw text) into tmp_path.
    """

    def _write(payload: object, name: str = "input.json") -> Path:
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
            return path
        return write_document(path, payload)

    return _write


@pytest.fixture
def data_file(tmp_path: Path, sample_records: List[Record]) -> Path:
    """
    A valid `{"data": [...]}` file holding `sample_records`.
    """
    return write_document(
        tmp_path / "data.json",
        {"data": [record.model_dump() for record in sample_records]},
    )


@pytest.fixture
def configured_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, data_file: Path) -> Path:
    """
    Point the environment-driven settings at the temporary data file.

    Returns the output directory configured for exports.
    """
    out_dir = tmp_path / "out"
    monkeypatch.setenv("DATA_PATH", str(data_file))
    monkeypatch.setenv("OUTPUT_DIR", str(out_dir))
    monkeypatch.setenv("MIN_VALUE", "10")
    monkeypatch.setenv("SORT_LOCALE", "C")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    return out_dir

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from bookconnect.config import get_settings
from bookconnect.storage import DATA_FILE, load_dataset


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_defaults(monkeypatch) -> None:
    for name in (
        "BOOKCONNECT_DATA_FILE",
        "BOOKCONNECT_PAGE_SIZE",
        "BOOKCONNECT_LOG_LEVEL",
        "BOOKCONNECT_ENV",
        "BOOKCONNECT_MAX_SESSIONS",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.data_file == DATA_FILE
    assert settings.page_size is None
    assert settings.log_level == "INFO"
    assert settings.env == "dev"
    assert settings.max_sessions == 1000


def test_settings_read_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("BOOKCONNECT_DATA_FILE", str(tmp_path / "books.json"))
    monkeypatch.setenv("BOOKCONNECT_PAGE_SIZE", "20")
    monkeypatch.setenv("BOOKCONNECT_LOG_LEVEL", "debug")
    monkeypatch.setenv("BOOKCONNECT_ENV", "prod")
    monkeypatch.setenv("BOOKCONNECT_MAX_SESSIONS", "50")

    settings = get_settings()

    assert settings.data_file == tmp_path / "books.json"
    assert settings.page_size == 20
    assert settings.log_level == "DEBUG"
    assert settings.env == "prod"
    assert settings.max_sessions == 50


def test_invalid_page_size_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv("BOOKCONNECT_PAGE_SIZE", "lots")
    assert get_settings().page_size is None


def test_bundled_sample_loads() -> None:
    dataset = load_dataset()
    assert len(dataset.books) == 7
    assert list(dataset.genres)[0] == "g-fiction"
    assert dataset.books[1].published.year == 1969


def test_page_size_override() -> None:
    dataset = load_dataset(DATA_FILE, page_size=3)
    assert dataset.page_size == 3


def _write(tmp_path: Path, payload) -> Path:
    path = tmp_path / "books.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_duplicate_ids_rejected(tmp_path: Path) -> None:
    book = {
        "id": "1",
        "title": "T",
        "author": "a",
        "published": "2000-01-01T00:00:00.000Z",
        "genres": ["g"],
    }
    path = _write(tmp_path, {"books": [book, book], "authors": {"a": "A"}, "genres": {"g": "G"}})
    with pytest.raises(ValueError):
        load_dataset(path)


def test_book_without_genres_rejected(tmp_path: Path) -> None:
    book = {
        "id": "1",
        "title": "T",
        "author": "a",
        "published": "2000-01-01T00:00:00.000Z",
        "genres": [],
    }
    path = _write(tmp_path, {"books": [book]})
    with pytest.raises(ValidationError):
        load_dataset(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        load_dataset(tmp_path / "absent.json")

"""Pytest configuration and shared fixtures."""

import json
from datetime import datetime, timezone
from typing import Any, Dict

import pytest

from smartwords_api.app.core.db import get_cursor, init_db
from smartwords_api.app.core.store import SetStore
from smartwords_api.app.records.sets import Word


@pytest.fixture
def default_set() -> Dict[str, Any]:
    """Attributes of a valid set with two words."""
    return {
        "id": "1234",
        "name": "Test Set",
        "description": "A test set",
        "created_at": datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        "words": (
            Word(id="1", word="test", meaning="A trial or experiment"),
            Word(
                id="2",
                word="example",
                meaning="A thing characteristic of its kind or illustrating a general rule.",
            ),
        ),
    }


@pytest.fixture
def database_url(tmp_path) -> str:
    """Path to a fresh, initialised SQLite file."""
    path = str(tmp_path / "smartwords_test.db")
    init_db(path)
    return path


@pytest.fixture
def store(database_url) -> SetStore:
    """An empty store backed by a temporary database."""
    return SetStore(database_url)


@pytest.fixture
def seeded_store(store, default_set) -> SetStore:
    """A store holding a single set named "Test Set"."""
    words = [word.to_document() for word in default_set["words"]]
    with get_cursor(store.database_url) as cursor:
        cursor.execute(
            "INSERT INTO sets (id, name, description, words, created_at) VALUES (?, ?, ?, ?, ?)",
            (
                default_set["id"],
                default_set["name"],
                default_set["description"],
                json.dumps(words),
                default_set["created_at"].isoformat(),
            ),
        )
    return store

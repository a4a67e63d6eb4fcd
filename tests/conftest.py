"""
Shared test configuration.
It puts the repository root on `sys.path` and fills in the environment the settings loader requires.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure required environment variables are present during tests."""

    defaults = {
        "PROJECT_NAME": "test-project",
        "ENV": "test",
        "LOG_LEVEL": "INFO",
    }

    for key, value in defaults.items():
        if os.getenv(key) is None:
            monkeypatch.setenv(key, value)


@pytest.fixture
def rick_payload() -> dict[str, Any]:
    return {
        "id": 1,
        "name": "Rick Sanchez",
        "status": "Alive",
        "species": "Human",
        "type": "",
        "gender": "Male",
        "origin": {"name": "Earth (C-137)", "url": "https://rickandmortyapi.com/api/location/1"},
        "image": "https://rickandmortyapi.com/api/character/avatar/1.jpeg",
        "episode": [
            "https://rickandmortyapi.com/api/episode/1",
            "https://rickandmortyapi.com/api/episode/2",
        ],
        "url": "https://rickandmortyapi.com/api/character/1",
        "created": "2017-11-04T18:48:46.250Z",
    }


@pytest.fixture
def pilot_payload() -> dict[str, Any]:
    return {
        "id": 1,
        "name": "Pilot",
        "air_date": "December 2, 2013",
        "episode": "S01E01",
        "characters": [
            "https://rickandmortyapi.com/api/character/1",
            "https://rickandmortyapi.com/api/character/2",
            "https://rickandmortyapi.com/api/character/35",
        ],
        "url": "https://rickandmortyapi.com/api/episode/1",
        "created": "2017-11-10T12:56:33.798Z",
    }


@pytest.fixture
def earth_payload() -> dict[str, Any]:
    return {
        "id": 1,
        "name": "Earth (C-137)",
        "type": "Planet",
        "dimension": "Dimension C-137",
        "residents": [
            "https://rickandmortyapi.com/api/character/38",
            "https://rickandmortyapi.com/api/character/45",
        ],
        "url": "https://rickandmortyapi.com/api/location/1",
        "created": "2017-11-10T12:42:04.162Z",
    }


@pytest.fixture
def characters_page_payload(rick_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "info": {
            "count": 826,
            "pages": 42,
            "next": "https://rickandmortyapi.com/api/character?page=2",
            "prev": None,
        },
        "results": [rick_payload],
    }

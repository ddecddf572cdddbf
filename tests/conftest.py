"""Shared test fixtures for result data trees, settings, the app, and HTTP client."""

import json
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from election_results_api.core.config import Settings
from election_results_api.main import create_app

NATIONAL_GENERAL_2020 = {"votes": 100}
KING_GENERAL_2020 = {"county": "king", "votes": 50}
NATIONAL_ST_2021 = {
    "id": {"nivaa": "land", "navn": "Norge"},
    "partier": [
        {"id": {"partikode": "A", "navn": "Arbeiderpartiet"}, "mandater": {"resultat": {"antall": 48}}},
        {"id": {"partikode": "H", "navn": "Høyre"}, "mandater": {"resultat": {"antall": 36}}},
    ],
    "stemmer": {"total": 2966303},
    "frammote": {"prosent": 77.2},
}
AKERSHUS_ST_2021 = {"id": {"nivaa": "fylke", "navn": "Akershus"}, "partier": []}


def write_json(path: Path, data: object) -> Path:
    """Write ``data`` as JSON to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Create a small result tree with national and county files."""
    root = tmp_path / "data"
    write_json(root / "general" / "2020" / "2020general.json", NATIONAL_GENERAL_2020)
    write_json(root / "general" / "2020" / "king.json", KING_GENERAL_2020)
    write_json(root / "st" / "2021" / "2021st.json", NATIONAL_ST_2021)
    write_json(root / "st" / "2021" / "akershus.json", AKERSHUS_ST_2021)
    return root


@pytest.fixture
def settings(data_dir: Path) -> Settings:
    """Test application settings pointing at the sample result tree."""
    return Settings(_env_file=None, data_dir=str(data_dir), log_level="DEBUG")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Create the FastAPI app for the sample result tree."""
    return create_app(settings)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the test app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

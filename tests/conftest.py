"""Shared pytest fixtures: a fake PokéAPI and an application wired to it."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from pokedex_api.app.core.cache import TTLCache
from pokedex_api.app.core.config import Settings
from pokedex_api.app.main import create_app
from pokedex_api.app.services.source_adapter import PokeAPISource

from .fakes import UPSTREAM, FakePokeAPI


@pytest.fixture
def upstream() -> FakePokeAPI:
    return FakePokeAPI()


@pytest.fixture
def source(upstream: FakePokeAPI) -> PokeAPISource:
    return PokeAPISource(UPSTREAM, transport=upstream.transport())


@pytest.fixture
def cache() -> TTLCache:
    return TTLCache(max_entries=50, default_ttl=60)


@pytest.fixture
def app_settings(tmp_path: Path) -> Settings:
    return Settings(database_url=str(tmp_path / "pokedex-test.db"), api_prefix="")


@pytest.fixture
def client(app_settings: Settings, upstream: FakePokeAPI) -> Iterator[TestClient]:
    app = create_app(app_settings, transport=upstream.transport())
    with TestClient(app) as test_client:
        yield test_client

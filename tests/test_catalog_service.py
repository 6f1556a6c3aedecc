"""Tests for catalog window computation and caching."""

from __future__ import annotations

import asyncio

import pytest

from pokedex_api.app.core.cache import TTLCache
from pokedex_api.app.core.errors import UpstreamFetchError
from pokedex_api.app.services.catalog_service import MAX_TOTAL, PAGE_CAP, CatalogService
from pokedex_api.app.services.source_adapter import PokeAPISource

from .fakes import FakePokeAPI


@pytest.fixture
def catalog(source: PokeAPISource, cache: TTLCache) -> CatalogService:
    return CatalogService(source, cache, ttl=60)


def test_first_window_has_ids_parsed_from_urls(catalog: CatalogService) -> None:
    entries = asyncio.run(catalog.get_window(30, 0))

    assert len(entries) == 30
    assert [e.id for e in entries] == list(range(1, 31))
    assert entries[0].name == "bulbasaur"
    assert entries[24].name == "pikachu"
    assert entries[24].url.endswith("/pokemon/25/")


@pytest.mark.parametrize("limit", [-5, 0, 1, 10, 30, 31, 500])
@pytest.mark.parametrize("offset", [-10, 0, 1, 120, 135, 149, 150, 151, 1000])
def test_window_is_bounded(catalog: CatalogService, limit: int, offset: int) -> None:
    entries = asyncio.run(catalog.get_window(limit, offset))

    assert len(entries) <= max(1, min(limit, PAGE_CAP))
    assert all(1 <= e.id <= MAX_TOTAL for e in entries)
    if entries:
        start = max(0, offset) + 1
        assert [e.id for e in entries] == list(range(start, start + len(entries)))


def test_window_is_trimmed_at_universe_bound(catalog: CatalogService) -> None:
    entries = asyncio.run(catalog.get_window(30, 140))

    assert [e.id for e in entries] == list(range(141, 151))


def test_offset_at_bound_skips_upstream(catalog: CatalogService, upstream: FakePokeAPI) -> None:
    assert asyncio.run(catalog.get_window(30, 150)) == []
    assert asyncio.run(catalog.get_window(30, 9999)) == []
    assert upstream.requests == []


def test_repeated_window_is_served_from_cache(catalog: CatalogService, upstream: FakePokeAPI) -> None:
    first = asyncio.run(catalog.get_window(30, 0))
    second = asyncio.run(catalog.get_window(30, 0))

    assert first == second
    assert upstream.count("/pokemon/") == 1


def test_equivalent_requests_share_a_cache_entry(catalog: CatalogService, upstream: FakePokeAPI) -> None:
    asyncio.run(catalog.get_window(100, -3))
    asyncio.run(catalog.get_window(30, 0))

    assert upstream.count("/pokemon/") == 1


def test_upstream_failure_is_not_cached(catalog: CatalogService, upstream: FakePokeAPI) -> None:
    upstream.failing.add("/api/v2/pokemon/")
    with pytest.raises(UpstreamFetchError):
        asyncio.run(catalog.get_window(30, 0))

    upstream.failing.clear()
    entries = asyncio.run(catalog.get_window(30, 0))

    assert len(entries) == 30
    assert upstream.count("/pokemon/") == 2

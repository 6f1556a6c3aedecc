"""Tests for the PokéAPI source adapter."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from pokedex_api.app.core.errors import UpstreamFetchError
from pokedex_api.app.services.source_adapter import PokeAPISource, extract_id

from .fakes import UPSTREAM, FakePokeAPI


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://pokeapi.co/api/v2/pokemon/25/", 25),
        ("https://pokeapi.co/api/v2/pokemon/150", 150),
        ("https://pokeapi.co/api/v2/pokemon/mew/", 0),
        ("", 0),
    ],
)
def test_extract_id(url: str, expected: int) -> None:
    assert extract_id(url) == expected


def test_fetch_page_sends_limit_and_offset(source: PokeAPISource, upstream: FakePokeAPI) -> None:
    page = asyncio.run(source.fetch_page(3, 24))

    assert [r.name for r in page.results] == ["pikachu", "raichu", "pokemon-27"]
    request = upstream.requests[-1]
    assert request.url.path == "/api/v2/pokemon/"
    assert request.url.params["limit"] == "3"
    assert request.url.params["offset"] == "24"


def test_fetch_pokemon_validates_payload(source: PokeAPISource) -> None:
    pokemon = asyncio.run(source.fetch_pokemon(25))

    assert pokemon.name == "pikachu"
    assert [slot.type.name for slot in pokemon.types] == ["electric"]
    assert pokemon.species is not None
    assert pokemon.species.url == f"{UPSTREAM}/pokemon-species/25/"


def test_fetch_evolution_chain_builds_tree(source: PokeAPISource) -> None:
    root = asyncio.run(source.fetch_evolution_chain(f"{UPSTREAM}/evolution-chain/10/"))

    assert root is not None
    assert root.species == "pichu"
    pikachu = root.children[0]
    assert pikachu.details[0].trigger == "level-up"
    raichu = pikachu.children[0]
    assert raichu.details[0].item == "thunder-stone"
    assert raichu.children == []


def test_status_error_raises_upstream_fetch_error(source: PokeAPISource) -> None:
    with pytest.raises(UpstreamFetchError) as excinfo:
        asyncio.run(source.fetch_pokemon(9999))
    assert excinfo.value.message == "Not Found"


def test_transport_error_raises_upstream_fetch_error() -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    source = PokeAPISource(UPSTREAM, transport=httpx.MockTransport(refuse))
    with pytest.raises(UpstreamFetchError):
        asyncio.run(source.fetch_page(30, 0))


def test_invalid_json_raises_upstream_fetch_error() -> None:
    source = PokeAPISource(
        UPSTREAM, transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))
    )
    with pytest.raises(UpstreamFetchError):
        asyncio.run(source.fetch_pokemon(1))


def test_unexpected_shape_raises_upstream_fetch_error() -> None:
    source = PokeAPISource(
        UPSTREAM, transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"id": "x"}))
    )
    with pytest.raises(UpstreamFetchError):
        asyncio.run(source.fetch_pokemon(1))


def test_chain_document_without_chain_yields_none() -> None:
    source = PokeAPISource(
        UPSTREAM, transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"id": 5}))
    )
    assert asyncio.run(source.fetch_evolution_chain(f"{UPSTREAM}/evolution-chain/5/")) is None

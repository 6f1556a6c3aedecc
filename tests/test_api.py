"""HTTP tests for the catalog and favorites endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from .fakes import FakePokeAPI


def test_catalog_default_window(client: TestClient) -> None:
    response = client.get("/catalog")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Request was successful"
    assert len(body["data"]) == 30
    assert body["data"][0] == {
        "id": 1,
        "name": "bulbasaur",
        "url": "https://pokeapi.co/api/v2/pokemon/1/",
    }


def test_catalog_limit_is_capped(client: TestClient) -> None:
    body = client.get("/catalog", params={"limit": 100, "offset": 140}).json()

    assert [item["id"] for item in body["data"]] == list(range(141, 151))


def test_catalog_past_bound_is_empty(client: TestClient, upstream: FakePokeAPI) -> None:
    body = client.get("/catalog", params={"offset": 150}).json()

    assert body["success"] is True
    assert body["data"] == []
    assert upstream.requests == []


def test_catalog_is_cached_between_requests(client: TestClient, upstream: FakePokeAPI) -> None:
    client.get("/catalog", params={"limit": 30, "offset": 0})
    client.get("/catalog", params={"limit": 30, "offset": 0})

    assert upstream.count("/pokemon/") == 1


def test_catalog_rejects_malformed_pagination(client: TestClient) -> None:
    for params in ({"limit": 0}, {"offset": -1}, {"limit": "many"}):
        response = client.get("/catalog", params=params)
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "ValidationError"
        assert isinstance(body["message"], list)


def test_detail_includes_evolutions_with_wire_names(client: TestClient) -> None:
    response = client.get("/catalog/25")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "pikachu"
    assert data["types"] == ["electric"]
    assert data["evolutions"] == [
        {"species": "raichu", "trigger": "use-item", "minLevel": None, "item": "thunder-stone"}
    ]


def test_detail_can_skip_evolutions(client: TestClient, upstream: FakePokeAPI) -> None:
    data = client.get("/catalog/25", params={"evolutions": "false"}).json()["data"]

    assert data["evolutions"] == []
    assert upstream.count("evolution-chain") == 0


def test_detail_rejects_non_numeric_id(client: TestClient) -> None:
    response = client.get("/catalog/pikachu")

    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"


def test_detail_upstream_failure(client: TestClient) -> None:
    response = client.get("/catalog/9999")

    assert response.status_code == 502
    body = response.json()
    assert body == {"success": False, "message": "Not Found", "error": "UpstreamFetchError"}


def test_favorites_lifecycle(client: TestClient) -> None:
    assert client.get("/favorites").json()["data"] == []

    response = client.post("/favorites", json={"entityId": 1})
    assert response.status_code == 201
    assert response.json()["message"] == "Pokemon added to favorites"
    created = client.post("/favorites", json={"entityId": 25}).json()["data"]
    assert created["entityId"] == 25
    assert created["name"] == "pikachu"
    assert created["image"] == "https://sprites.example/25.png"
    assert created["types"] == ["electric"]
    assert created["abilities"] == ["static", "lightning-rod"]
    assert created["createdAt"] == created["updatedAt"]

    listed = client.get("/favorites").json()["data"]
    assert [fav["entityId"] for fav in listed] == [25, 1]

    response = client.delete("/favorites/25")
    assert response.status_code == 200
    assert response.json()["message"] == "Pokemon removed from favorites"
    assert response.json()["data"]["entityId"] == 25
    assert [fav["entityId"] for fav in client.get("/favorites").json()["data"]] == [1]


def test_duplicate_favorite_conflicts(client: TestClient) -> None:
    client.post("/favorites", json={"entityId": 25})
    response = client.post("/favorites", json={"entityId": 25})

    assert response.status_code == 409
    assert response.json() == {
        "success": False,
        "message": "Pokemon is already in favorites",
        "error": "ConflictError",
    }
    assert len(client.get("/favorites").json()["data"]) == 1


def test_removing_absent_favorite_is_not_found(client: TestClient) -> None:
    response = client.delete("/favorites/25")

    assert response.status_code == 404
    assert response.json()["error"] == "NotFoundError"
    assert response.json()["message"] == "Pokemon is not in favorites"


def test_add_favorite_validates_payload(client: TestClient) -> None:
    assert client.post("/favorites", json={"entityId": 0}).status_code == 400
    assert client.post("/favorites", json={}).status_code == 400


def test_add_favorite_for_unknown_pokemon_fails_upstream(client: TestClient) -> None:
    response = client.post("/favorites", json={"entityId": 9999})

    assert response.status_code == 502
    assert client.get("/favorites").json()["data"] == []


def test_unknown_route_uses_error_envelope(client: TestClient) -> None:
    response = client.get("/nothing-here")

    assert response.status_code == 404
    assert response.json()["success"] is False

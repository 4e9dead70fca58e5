from fastapi.testclient import TestClient

from rickmorty.api import create_app
from rickmorty.sources.base import SourceUnavailableError
from tests.fakes import FakeEntitySource


def test_health_check(test_client: TestClient) -> None:
    response = test_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_top_pairs_endpoint_returns_ranked_pairs(test_client: TestClient) -> None:
    response = test_client.get("/top-pairs")
    assert response.status_code == 200

    data = response.json()
    assert [pair["episodes"] for pair in data] == [3, 2, 1]
    assert data[0] == {
        "character1": {
            "name": "Character A",
            "url": "https://rickandmortyapi.com/api/character/1",
        },
        "character2": {
            "name": "Character B",
            "url": "https://rickandmortyapi.com/api/character/2",
        },
        "episodes": 3,
    }


def test_top_pairs_endpoint_applies_bounds(
    test_client: TestClient, fake_source: FakeEntitySource
) -> None:
    response = test_client.get("/top-pairs?min=2&max=2")
    assert response.status_code == 200

    data = response.json()
    assert len(data) == 1
    assert data[0]["character1"]["name"] == "Character A"
    assert data[0]["character2"]["name"] == "Character C"
    assert len(fake_source.calls_to("get_characters_by_ids")) == 1


def test_top_pairs_endpoint_zero_limit(
    test_client: TestClient, fake_source: FakeEntitySource
) -> None:
    response = test_client.get("/top-pairs?limit=0")
    assert response.status_code == 200
    assert response.json() == []
    assert fake_source.calls_to("get_characters_by_ids") == []


def test_top_pairs_endpoint_rejects_non_integer_bounds(test_client: TestClient) -> None:
    response = test_client.get("/top-pairs?min=lots")
    assert response.status_code == 422


def test_search_endpoint_returns_tagged_results(test_client: TestClient) -> None:
    response = test_client.get("/search?term=rick")
    assert response.status_code == 200
    assert response.json() == [
        {
            "name": "Rick Sanchez",
            "type": "character",
            "url": "https://rickandmortyapi.com/api/character/4",
        },
        {
            "name": "Rick's Hideout",
            "type": "location",
            "url": "https://rickandmortyapi.com/api/location/1",
        },
    ]


def test_search_endpoint_applies_limit(test_client: TestClient) -> None:
    response = test_client.get("/search?term=character&limit=2")
    assert response.status_code == 200
    assert [r["name"] for r in response.json()] == ["Character A", "Character B"]


def test_search_endpoint_requires_term(
    test_client: TestClient, fake_source: FakeEntitySource
) -> None:
    for url in ["/search", "/search?term=", "/search?term=%20%20"]:
        response = test_client.get(url)
        assert response.status_code == 400
        assert response.json()["detail"] == "Search term is required."
    assert fake_source.calls == []


def test_upstream_failure_maps_to_bad_gateway() -> None:
    source = FakeEntitySource(error=SourceUnavailableError("connection refused", url="episode"))
    client = TestClient(create_app(entity_source=source))

    response = client.get("/top-pairs")
    assert response.status_code == 502
    assert response.json()["detail"] == "Upstream API unavailable"

    response = client.get("/search?term=rick")
    assert response.status_code == 502

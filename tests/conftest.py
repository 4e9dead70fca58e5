import pytest
from fastapi.testclient import TestClient

from rickmorty.api import create_app
from rickmorty.domain.character import Character, Location
from rickmorty.domain.episode import Episode
from tests.fakes import FakeEntitySource, make_character, make_episode


@pytest.fixture
def abc_episodes() -> list[Episode]:
    """A-B share 3 episodes, A-C share 2, B-C share 1 (A=1, B=2, C=3)."""
    return [
        make_episode(1, 1, 2),
        make_episode(2, 1, 2),
        make_episode(3, 1, 2, 3),
        make_episode(4, 1, 3),
    ]


@pytest.fixture
def abc_characters() -> list[Character]:
    return [
        make_character(1, "Character A"),
        make_character(2, "Character B"),
        make_character(3, "Character C"),
    ]


@pytest.fixture
def fake_source(abc_episodes: list[Episode], abc_characters: list[Character]) -> FakeEntitySource:
    return FakeEntitySource(
        episodes=abc_episodes,
        characters=abc_characters + [make_character(4, "Rick Sanchez")],
        locations=[
            Location(
                id=1,
                name="Rick's Hideout",
                type="Base",
                url="https://rickandmortyapi.com/api/location/1",
            )
        ],
    )


@pytest.fixture
def test_client(fake_source: FakeEntitySource) -> TestClient:
    """Create test client backed by the fake entity source."""
    app = create_app(entity_source=fake_source)
    return TestClient(app)

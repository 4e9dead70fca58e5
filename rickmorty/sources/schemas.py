"""Wire models for the Rick and Morty REST API."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from rickmorty.domain.character import Character, Location
from rickmorty.domain.episode import Episode

T = TypeVar("T")


class ApiPageInfo(BaseModel):
    count: int
    pages: int
    next: str | None = None
    prev: str | None = None


class ApiPaginatedResponse(BaseModel, Generic[T]):
    """One page of a listing endpoint."""

    info: ApiPageInfo
    results: list[T] = []


class ApiCharacter(BaseModel):
    id: int
    name: str
    type: str = ""
    url: str
    episode: list[str] = []

    def to_domain(self) -> Character:
        return Character(
            id=self.id, name=self.name, type=self.type, url=self.url, episode=self.episode
        )


class ApiLocation(BaseModel):
    id: int
    name: str
    type: str = ""
    url: str

    def to_domain(self) -> Location:
        return Location(id=self.id, name=self.name, type=self.type, url=self.url)


class ApiEpisode(BaseModel):
    id: int
    name: str
    episode: str  # season/episode code, e.g. "S01E01"
    url: str
    characters: list[str] = []

    def to_domain(self) -> Episode:
        return Episode(
            id=self.id,
            name=self.name,
            episode_code=self.episode,
            url=self.url,
            characters=self.characters,
        )

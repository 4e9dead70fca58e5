"""Response bodies of the HTTP API."""

from pydantic import BaseModel

from rickmorty.domain.character import Character
from rickmorty.domain.pairs import TopPair


class CharacterBase(BaseModel):
    name: str
    url: str

    @classmethod
    def from_character(cls, character: Character) -> "CharacterBase":
        return cls(name=character.name, url=character.url)


class TopPairResponse(BaseModel):
    character1: CharacterBase
    character2: CharacterBase
    episodes: int

    @classmethod
    def from_top_pair(cls, top_pair: TopPair) -> "TopPairResponse":
        return cls(
            character1=CharacterBase.from_character(top_pair.character1),
            character2=CharacterBase.from_character(top_pair.character2),
            episodes=top_pair.episodes,
        )

"""Character co-occurrence domain models."""

from typing import Any

from pydantic import BaseModel, model_validator

from rickmorty.domain.character import Character


class CharacterPair(BaseModel):
    """An unordered pair of two distinct character IDs.

    The smaller ID is always stored first, so ``CharacterPair(first_id=7, second_id=3)``
    and ``CharacterPair(first_id=3, second_id=7)`` compare and hash equal.

    Attributes:
        first_id: The smaller character ID.
        second_id: The larger character ID.
    """

    first_id: int
    second_id: int

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _canonical_order(cls, data: Any) -> Any:
        if isinstance(data, dict) and "first_id" in data and "second_id" in data:
            first_id, second_id = data["first_id"], data["second_id"]
            if first_id == second_id:
                raise ValueError(f"A character cannot pair with itself: {first_id}")
            if first_id > second_id:
                data = {**data, "first_id": second_id, "second_id": first_id}
        return data

    @classmethod
    def of(cls, id_a: int, id_b: int) -> "CharacterPair":
        return cls(first_id=id_a, second_id=id_b)


class RankedPair(BaseModel):
    """A character pair and the number of episodes it shares, after ranking."""

    pair: CharacterPair
    episodes: int

    model_config = {"frozen": True}


class TopPair(BaseModel):
    """A ranked pair resolved to full character records.

    ``character1`` and ``character2`` follow the pair's canonical order
    (smaller ID first).
    """

    character1: Character
    character2: Character
    episodes: int

    model_config = {"frozen": True}

"""Character and location domain models."""

from pydantic import BaseModel


class Character(BaseModel):
    """Represents a character as returned by the entity source."""

    id: int
    name: str
    type: str = ""
    url: str
    episode: tuple[str, ...] = ()  # episode URLs

    model_config = {"frozen": True}


class Location(BaseModel):
    id: int
    name: str
    type: str = ""
    url: str

    model_config = {"frozen": True}

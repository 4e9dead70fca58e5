"""Episode domain models."""

from pydantic import BaseModel


class Episode(BaseModel):
    """Represents an episode as returned by the entity source.

    Attributes:
        id: The ID of the episode.
        name: The episode title.
        episode_code: Season/episode code, e.g. "S01E01".
        url: Canonical API URL of the episode.
        characters: URLs of the characters appearing in the episode.
    """

    id: int
    name: str
    episode_code: str
    url: str
    characters: tuple[str, ...] = ()

    model_config = {"frozen": True}

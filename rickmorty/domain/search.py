"""Search domain models."""

from typing import Literal

from pydantic import BaseModel


class SearchResult(BaseModel):
    """A single cross-entity search hit, tagged with the kind of entity it came from."""

    name: str
    type: Literal["character", "location", "episode"]
    url: str

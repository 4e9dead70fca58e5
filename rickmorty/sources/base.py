from typing import Iterable, List, Protocol

from rickmorty.domain.character import Character, Location
from rickmorty.domain.episode import Episode


class SourceUnavailableError(RuntimeError):
    """Raised when the upstream entity source cannot be reached or returns an unusable response."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class EntitySource(Protocol):
    """Protocol for entity source implementations.

    Listings are returned fully depaginated. Implementations raise
    SourceUnavailableError on network or protocol failures.
    """

    async def get_all_episodes(self, name: str | None = None) -> List[Episode]:
        """Get every episode, optionally filtered by name. Empty if the listing is not found."""
        ...

    async def get_all_characters(self, name: str | None = None) -> List[Character]:
        """Get every character, optionally filtered by name."""
        ...

    async def get_all_locations(self, name: str | None = None) -> List[Location]:
        """Get every location, optionally filtered by name."""
        ...

    async def get_characters_by_ids(self, ids: Iterable[int]) -> List[Character]:
        """Get the characters with the given IDs in one call.

        IDs that do not exist are simply absent from the result.
        """
        ...

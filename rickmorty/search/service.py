import asyncio

from loguru import logger

from rickmorty.domain.search import SearchResult
from rickmorty.sources.base import EntitySource


class SearchService:
    """Searches characters, locations and episodes by name in one go."""

    def __init__(self, *, source: EntitySource):
        self.source = source

    async def search(self, term: str, limit: int | None = None) -> list[SearchResult]:
        """Search all three entity kinds concurrently and merge the hits.

        Hits are ordered characters first, then locations, then episodes.
        ``limit`` only truncates when positive.
        """
        if not term or not term.strip():
            return []

        # A failing fetch cancels the other two before the error propagates
        try:
            async with asyncio.TaskGroup() as group:
                characters_task = group.create_task(self.source.get_all_characters(term))
                locations_task = group.create_task(self.source.get_all_locations(term))
                episodes_task = group.create_task(self.source.get_all_episodes(term))
        except ExceptionGroup as eg:
            raise eg.exceptions[0]

        characters = characters_task.result()
        locations = locations_task.result()
        episodes = episodes_task.result()
        logger.debug(
            f"Search '{term}': {len(characters)} characters, "
            f"{len(locations)} locations, {len(episodes)} episodes"
        )

        results = (
            [SearchResult(name=c.name, type="character", url=c.url) for c in characters]
            + [SearchResult(name=loc.name, type="location", url=loc.url) for loc in locations]
            + [SearchResult(name=e.name, type="episode", url=e.url) for e in episodes]
        )

        if limit is not None and limit > 0:
            results = results[:limit]

        return results

from fastapi import APIRouter, HTTPException, Query
from loguru import logger

from rickmorty.api.schemas import TopPairResponse
from rickmorty.cooccurrence.service import TopPairsService
from rickmorty.domain.search import SearchResult
from rickmorty.search.service import SearchService
from rickmorty.sources.base import EntitySource, SourceUnavailableError


def _create_search_endpoint(search_service: SearchService):
    """Create the search endpoint handler."""

    async def search(term: str = "", limit: int | None = None) -> list[SearchResult]:
        """Search characters, locations and episodes by name."""
        if not term.strip():
            raise HTTPException(status_code=400, detail="Search term is required.")

        try:
            return await search_service.search(term, limit)
        except SourceUnavailableError as e:
            logger.error(f"Error searching for '{term}': {str(e)}")
            raise HTTPException(status_code=502, detail="Upstream API unavailable") from e

    return search


def _create_top_pairs_endpoint(top_pairs_service: TopPairsService):
    """Create the top pairs endpoint handler."""

    async def get_top_pairs(
        min_episodes: int | None = Query(default=None, alias="min"),
        max_episodes: int | None = Query(default=None, alias="max"),
        limit: int | None = None,
    ) -> list[TopPairResponse]:
        """Character pairs sharing the most episodes, with inclusive bounds on the count."""
        try:
            top_pairs = await top_pairs_service.get_top_pairs(
                min_episodes=min_episodes, max_episodes=max_episodes, limit=limit
            )
        except SourceUnavailableError as e:
            logger.error(f"Error computing top pairs: {str(e)}")
            raise HTTPException(status_code=502, detail="Upstream API unavailable") from e

        return [TopPairResponse.from_top_pair(top_pair) for top_pair in top_pairs]

    return get_top_pairs


def get_endpoints_router(*, entity_source: EntitySource, default_limit: int) -> APIRouter:
    router = APIRouter()

    search_service = SearchService(source=entity_source)
    top_pairs_service = TopPairsService(source=entity_source, default_limit=default_limit)

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    router.get("/search")(_create_search_endpoint(search_service))
    router.get("/top-pairs")(_create_top_pairs_endpoint(top_pairs_service))

    return router

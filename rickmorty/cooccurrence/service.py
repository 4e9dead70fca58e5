"""Service computing the characters that appear together in the most episodes."""

from loguru import logger

from rickmorty.domain.pairs import TopPair
from rickmorty.sources.base import EntitySource

from .assembler import assemble_top_pairs
from .pair_index import build_pair_index
from .ranking import DEFAULT_TOP_PAIRS_LIMIT, rank_pairs
from .resolver import resolve_characters


class TopPairsService:
    """Ranks character pairs by the number of episodes they share.

    Every call works on a freshly fetched episode list; nothing is cached
    between calls.
    """

    def __init__(self, *, source: EntitySource, default_limit: int = DEFAULT_TOP_PAIRS_LIMIT):
        """Initialize the service.

        Args:
            source: Entity source providing episodes and characters
            default_limit: Number of pairs returned when no limit is given
        """
        self.source = source
        self.default_limit = default_limit

    async def get_top_pairs(
        self,
        min_episodes: int | None = None,
        max_episodes: int | None = None,
        limit: int | None = None,
    ) -> list[TopPair]:
        """Get the top co-occurring character pairs.

        Characters are resolved with exactly one batched call to the source,
        and no call at all when no pair survives filtering. Source errors
        propagate to the caller.

        Args:
            min_episodes: Inclusive minimum number of shared episodes
            max_episodes: Inclusive maximum number of shared episodes
            limit: Maximum number of pairs. Zero or negative returns nothing.

        Returns:
            Pairs ordered by shared episodes, most first
        """
        episodes = await self.source.get_all_episodes()

        pair_counts = build_pair_index(episodes)
        logger.debug(f"Indexed {len(pair_counts)} pairs from {len(episodes)} episodes")

        ranked_pairs = rank_pairs(
            pair_counts,
            min_episodes=min_episodes,
            max_episodes=max_episodes,
            limit=self.default_limit if limit is None else limit,
        )
        if not ranked_pairs:
            logger.info("No character pairs matched the requested bounds")
            return []

        characters = await resolve_characters(ranked_pairs, self.source)
        return assemble_top_pairs(ranked_pairs, characters)

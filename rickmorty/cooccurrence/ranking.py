"""Filtering and ranking of the pair frequency index."""

from rickmorty.domain.pairs import CharacterPair, RankedPair

DEFAULT_TOP_PAIRS_LIMIT = 20


def rank_pairs(
    pair_counts: dict[CharacterPair, int],
    *,
    min_episodes: int | None = None,
    max_episodes: int | None = None,
    limit: int | None = None,
) -> list[RankedPair]:
    """Filter pairs by inclusive episode bounds and rank them by shared episodes.

    Pairs with equal counts keep the order in which they were first inserted
    into ``pair_counts``.

    Args:
        pair_counts: Pair frequency index, in first-encountered order
        min_episodes: Inclusive lower bound on shared episodes, if any
        max_episodes: Inclusive upper bound on shared episodes, if any
        limit: Maximum number of pairs to return. Defaults to
               DEFAULT_TOP_PAIRS_LIMIT when None. Zero or negative returns nothing.

    Returns:
        Ranked pairs, most shared episodes first
    """
    if limit is None:
        limit = DEFAULT_TOP_PAIRS_LIMIT
    if limit <= 0:
        return []

    survivors = [
        (position, pair, count)
        for position, (pair, count) in enumerate(pair_counts.items())
        if (min_episodes is None or count >= min_episodes)
        and (max_episodes is None or count <= max_episodes)
    ]
    survivors.sort(key=lambda item: (-item[2], item[0]))

    return [RankedPair(pair=pair, episodes=count) for _, pair, count in survivors[:limit]]

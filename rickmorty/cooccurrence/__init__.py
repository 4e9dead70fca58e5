"""Character co-occurrence ranking across episodes."""

from rickmorty.cooccurrence.pair_index import build_pair_index, extract_character_id
from rickmorty.cooccurrence.ranking import DEFAULT_TOP_PAIRS_LIMIT, rank_pairs
from rickmorty.cooccurrence.service import TopPairsService

__all__ = [
    "DEFAULT_TOP_PAIRS_LIMIT",
    "TopPairsService",
    "build_pair_index",
    "extract_character_id",
    "rank_pairs",
]

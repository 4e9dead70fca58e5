"""Resolution of ranked pairs to character records."""

from loguru import logger

from rickmorty.domain.character import Character
from rickmorty.domain.pairs import RankedPair
from rickmorty.sources.base import EntitySource


def distinct_character_ids(ranked_pairs: list[RankedPair]) -> list[int]:
    """IDs referenced by the pairs, each once, in first-seen order."""
    ids: dict[int, None] = {}
    for ranked in ranked_pairs:
        ids.setdefault(ranked.pair.first_id)
        ids.setdefault(ranked.pair.second_id)
    return list(ids)


async def resolve_characters(
    ranked_pairs: list[RankedPair], source: EntitySource
) -> dict[int, Character]:
    """Fetch every character referenced by the pairs in a single batched call.

    Args:
        ranked_pairs: Non-empty list of ranked pairs
        source: Entity source to fetch from

    Returns:
        Dictionary mapping character ID to Character for all characters found
    """
    ids = distinct_character_ids(ranked_pairs)
    characters = await source.get_characters_by_ids(ids)
    logger.debug(f"Resolved {len(characters)} of {len(ids)} characters")
    return {character.id: character for character in characters}

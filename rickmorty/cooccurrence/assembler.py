from loguru import logger

from rickmorty.domain.character import Character
from rickmorty.domain.pairs import RankedPair, TopPair


def assemble_top_pairs(
    ranked_pairs: list[RankedPair], characters: dict[int, Character]
) -> list[TopPair]:
    """Join ranked pairs with their characters, keeping rank order.

    Pairs whose characters were not resolved are skipped.
    """
    top_pairs = []
    for ranked in ranked_pairs:
        character1 = characters.get(ranked.pair.first_id)
        character2 = characters.get(ranked.pair.second_id)
        if character1 is None or character2 is None:
            logger.debug(
                f"Skipping pair ({ranked.pair.first_id}, {ranked.pair.second_id}): "
                "character not found"
            )
            continue

        top_pairs.append(
            TopPair(character1=character1, character2=character2, episodes=ranked.episodes)
        )

    return top_pairs

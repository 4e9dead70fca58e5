"""Building the character pair frequency index from episode cast lists."""

import re
from itertools import combinations
from typing import Iterable

from rickmorty.domain.episode import Episode
from rickmorty.domain.pairs import CharacterPair

# ASCII digits only: int() alone would also accept "1_0" and non-ASCII digits
_ID_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


def extract_character_id(url: str) -> int | None:
    """Extract the character ID from the trailing path segment of a character URL.

    Args:
        url: Character URL, e.g. ``https://rickandmortyapi.com/api/character/42``

    Returns:
        The character ID, or None if the URL has no integer trailing segment
    """
    if not url:
        return None

    _, slash, id_part = url.rpartition("/")
    if not slash or not _ID_PATTERN.fullmatch(id_part):
        return None

    return int(id_part)


def episode_character_ids(episode: Episode) -> list[int]:
    """Distinct, successfully parsed character IDs of an episode in ascending order."""
    ids = {extract_character_id(url) for url in episode.characters}
    ids.discard(None)
    return sorted(ids)  # type: ignore[arg-type]


def build_pair_index(episodes: Iterable[Episode]) -> dict[CharacterPair, int]:
    """Count, for every unordered pair of characters, the episodes they share.

    Each episode adds exactly 1 to every pair of its distinct characters.
    Unparseable character URLs are dropped. The returned dict keeps pairs
    in the order they were first encountered.

    Args:
        episodes: Episodes to index

    Returns:
        Dictionary mapping CharacterPair to the number of shared episodes
    """
    # Counted on (smaller, larger) id tuples; one CharacterPair per distinct pair
    counts: dict[tuple[int, int], int] = {}

    for episode in episodes:
        for key in combinations(episode_character_ids(episode), 2):
            counts[key] = counts.get(key, 0) + 1

    return {
        CharacterPair(first_id=first_id, second_id=second_id): count
        for (first_id, second_id), count in counts.items()
    }

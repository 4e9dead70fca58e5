"""CLI printing the character pairs that appear together in the most episodes"""

import argparse
import asyncio

from rickmorty.config import settings
from rickmorty.cooccurrence.service import TopPairsService
from rickmorty.domain.pairs import TopPair
from rickmorty.sources.rick_and_morty_api import RickAndMortyApiClient


def format_top_pair(top_pair: TopPair) -> str:
    return f"{top_pair.episodes}\t{top_pair.character1.name}\t{top_pair.character2.name}"


async def main(min_episodes: int | None, max_episodes: int | None, limit: int | None) -> None:
    source = RickAndMortyApiClient(
        base_url=settings.rick_and_morty_api_url, timeout=settings.request_timeout
    )
    service = TopPairsService(source=source, default_limit=settings.top_pairs_default_limit)
    try:
        top_pairs = await service.get_top_pairs(
            min_episodes=min_episodes, max_episodes=max_episodes, limit=limit
        )
    finally:
        await source.aclose()

    for top_pair in top_pairs:
        print(format_top_pair(top_pair))


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--min", type=int, required=False, help="Minimum number of shared episodes (inclusive)"
    )
    parser.add_argument(
        "--max", type=int, required=False, help="Maximum number of shared episodes (inclusive)"
    )
    parser.add_argument(
        "--limit",
        type=int,
        required=False,
        help="Maximum number of pairs to print",
        default=settings.top_pairs_default_limit,
    )

    args = parser.parse_args()

    asyncio.run(main(min_episodes=args.min, max_episodes=args.max, limit=args.limit))

from typing import Any, Iterable, List, Type, TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel, TypeAdapter

from rickmorty.domain.character import Character, Location
from rickmorty.domain.episode import Episode
from rickmorty.sources.base import EntitySource, SourceUnavailableError
from rickmorty.sources.schemas import (
    ApiCharacter,
    ApiEpisode,
    ApiLocation,
    ApiPaginatedResponse,
)

DEFAULT_BASE_URL = "https://rickandmortyapi.com/api/"

ApiModel = TypeVar("ApiModel", bound=BaseModel)


class RickAndMortyApiClient(EntitySource):
    """Entity source backed by the public Rick and Morty REST API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: Root of the API. Endpoint paths are resolved relative to it.
            timeout: Request timeout in seconds, used when no client is given.
            client: Preconfigured httpx client. If not provided, one is created
                    and owned by this instance.
        """
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            headers={"Accept": "application/json"},
            timeout=timeout,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_all_episodes(self, name: str | None = None) -> List[Episode]:
        results = await self._get_all_pages("episode", ApiEpisode, name)
        return [episode.to_domain() for episode in results]

    async def get_all_characters(self, name: str | None = None) -> List[Character]:
        results = await self._get_all_pages("character", ApiCharacter, name)
        return [character.to_domain() for character in results]

    async def get_all_locations(self, name: str | None = None) -> List[Location]:
        results = await self._get_all_pages("location", ApiLocation, name)
        return [location.to_domain() for location in results]

    async def get_characters_by_ids(self, ids: Iterable[int]) -> List[Character]:
        """Get characters by ID with a single request to ``character/<id>,<id>,...``."""
        id_list = list(dict.fromkeys(ids))
        if not id_list:
            return []

        url = f"character/{','.join(str(i) for i in id_list)}"
        response = await self._get(url)
        if response is None:
            return []

        # The API returns a bare object instead of a list when one ID is requested
        payload = self._parse(url, response, lambda r: r.json())
        if isinstance(payload, dict):
            payload = [payload]
        characters = self._parse(
            url, payload, TypeAdapter(list[ApiCharacter]).validate_python
        )
        return [character.to_domain() for character in characters]

    async def _get_all_pages(
        self, endpoint: str, model: Type[ApiModel], name: str | None
    ) -> List[ApiModel]:
        """Follow ``info.next`` links until the listing is exhausted.

        A 404 ends the listing; this is how the API reports a filter with no matches.
        """
        page_model = ApiPaginatedResponse[model]  # type: ignore[valid-type]
        params = {"name": name} if name and name.strip() else None
        url: str | None = endpoint
        results: List[ApiModel] = []

        while url:
            response = await self._get(url, params=params)
            if response is None:
                break

            page = self._parse(url, response.content, page_model.model_validate_json)
            results.extend(page.results)
            logger.debug(f"Fetched {len(page.results)} {endpoint} results from {url}")

            # The next link already carries the query string
            url = page.info.next
            params = None

        return results

    async def _get(self, url: str, params: dict[str, str] | None = None) -> httpx.Response | None:
        """GET a URL, returning None on 404 and raising SourceUnavailableError on failure."""
        try:
            response = await self._client.get(url, params=params)
            if response.status_code == httpx.codes.NOT_FOUND:
                return None
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Request to {url} failed: {str(e)}")
            raise SourceUnavailableError(f"Request to {url} failed: {str(e)}", url=url) from e
        return response

    @staticmethod
    def _parse(url: str, data: Any, parser: Any) -> Any:
        try:
            return parser(data)
        except ValueError as e:
            logger.error(f"Unexpected response from {url}: {str(e)}")
            raise SourceUnavailableError(f"Unexpected response from {url}", url=url) from e

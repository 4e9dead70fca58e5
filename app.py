import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from rickmorty.api import create_app
from rickmorty.config import settings
from rickmorty.sources.rick_and_morty_api import RickAndMortyApiClient

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info(f"Initializing aggregator against {settings.rick_and_morty_api_url}")
entity_source = RickAndMortyApiClient(
    base_url=settings.rick_and_morty_api_url, timeout=settings.request_timeout
)


@asynccontextmanager
async def lifespan(app: FastAPI):  # noqa: ARG001
    yield
    await entity_source.aclose()


app = create_app(entity_source=entity_source, lifespan=lifespan)

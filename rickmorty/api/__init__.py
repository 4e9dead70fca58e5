from contextlib import AbstractAsyncContextManager
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rickmorty.api.endpoints import get_endpoints_router
from rickmorty.config import settings
from rickmorty.sources.base import EntitySource


def create_app(
    *,
    entity_source: EntitySource,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[None]] | None = None,
) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI(
        title="Rick and Morty Aggregator API",
        description="An API that aggregates data from the Rick and Morty API",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        router=get_endpoints_router(
            entity_source=entity_source, default_limit=settings.top_pairs_default_limit
        )
    )

    return app

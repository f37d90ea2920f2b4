from typing import Annotated, Any

from fastapi import APIRouter, Depends, FastAPI, Path, Query
from fastapi.middleware.cors import CORSMiddleware

from economy_api.api.dependencies import HandlerDep, ServiceDep, install_service, lifespan
from economy_api.api.validation import (
    MAX_DAYS,
    MAX_LISTING_LIMIT,
    register_error_handlers,
    validate_season,
)
from economy_api.config import settings
from economy_api.dto import ItemDetailQuery, ItemsQuery, ListingsCountQuery, ListingsQuery
from economy_api.logging import configure_logging
from economy_api.services import EconomyService

API_PREFIX = "/api/economy"

router = APIRouter(prefix=API_PREFIX, dependencies=[Depends(validate_season)])


@router.get("/items")
async def get_items(
    handler: HandlerDep,
    season: int | None = None,
    days: Annotated[int | None, Query(ge=1, le=MAX_DAYS)] = None,
):
    """Items with aggregated price data."""
    return await handler.get_items(ItemsQuery(season=season, days=days))


@router.get("/listings/{item_name}")
async def get_listings(
    handler: HandlerDep,
    item_name: Annotated[str, Path(min_length=1)],
    date: str | None = None,
    ingestion_date: Annotated[str | None, Query(alias="ingestionDate")] = None,
    season: int | None = None,
):
    """Listings of an item on a data date or an ingestion date."""
    return await handler.get_listings(
        ListingsQuery(
            item_name=item_name,
            date=date,
            ingestion_date=ingestion_date,
            season=season,
        )
    )


@router.get("/items/{item_name}")
async def get_item_detail(
    handler: HandlerDep,
    item_name: Annotated[str, Path(min_length=1)],
    season: int | None = None,
    limit: Annotated[int | None, Query(ge=1, le=MAX_LISTING_LIMIT)] = None,
):
    """Detailed data for one item."""
    return await handler.get_item_detail(
        ItemDetailQuery(item_name=item_name, season=season, limit=limit)
    )


@router.get("/listings-count")
async def get_listings_count(handler: HandlerDep, season: int | None = None):
    """Total listings in a season."""
    return await handler.get_listings_count(ListingsCountQuery(season=season))


def create_app(service: EconomyService | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        service: Pre-built service. If None, the lifespan builds one from settings.

    Returns:
        The configured application
    """
    configure_logging(level=settings.log_level, format_json=settings.log_json)

    app = FastAPI(
        title="Economy API",
        description="Read-only item listings and price summaries",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    if service is not None:
        install_service(app, service)

    @app.get("/")
    async def root(service: ServiceDep) -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Economy API",
            "version": "0.1.0",
            "currentSeason": service.current_season,
            "endpoints": {
                "items": f"{API_PREFIX}/items",
                "item": f"{API_PREFIX}/items/{{itemName}}",
                "listings": f"{API_PREFIX}/listings/{{itemName}}",
                "listingsCount": f"{API_PREFIX}/listings-count",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health")
    async def health(handler: HandlerDep):
        """Health check endpoint."""
        return await handler.health_check()

    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "economy_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )

"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state, either passed to ``create_app`` or
      built during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from economy_api.config import settings
from economy_api.handlers import EconomyHandler
from economy_api.logging import get_logger
from economy_api.protocols import ResponseCache
from economy_api.repositories import (
    InMemoryResponseCache,
    RedisResponseCache,
    SqlEconomyRepository,
)
from economy_api.services import EconomyService

logger = get_logger(__name__)


def build_cache() -> ResponseCache:
    """Create the configured response cache backend."""
    if settings.uses_redis:
        return RedisResponseCache.create()
    return InMemoryResponseCache()


def install_service(app: FastAPI, service: EconomyService) -> None:
    """Store a service and its handler in app.state."""
    app.state.economy_service = service
    app.state.economy_handler = EconomyHandler(economy_service=service)


def get_economy_service(request: Request) -> EconomyService:
    """Dependency injection for EconomyService from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The EconomyService instance from app.state

    Raises:
        RuntimeError: If service is not initialized
    """
    service = getattr(request.app.state, "economy_service", None)
    if service is None:
        raise RuntimeError("EconomyService not initialized. Check lifespan setup.")
    return service


def get_handler(request: Request) -> EconomyHandler:
    """Dependency injection for EconomyHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The EconomyHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "economy_handler", None)
    if handler is None:
        raise RuntimeError("EconomyHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    When no service was installed up front, builds all layers and stores
    them in app.state:
    1. Store (database) and cache backends
    2. Service (business logic) - app.state.economy_service
    3. Handler (HTTP endpoints) - app.state.economy_handler

    Cleanup:
        Disposes of the store and removes what it installed on shutdown
    """
    store = None
    if getattr(app.state, "economy_service", None) is None:
        store = SqlEconomyRepository.create()
        cache = build_cache()
        install_service(app, EconomyService.create(store=store, cache=cache))
        logger.info(
            "Economy service initialized",
            database_url=settings.database_url,
            cache_backend=settings.cache_backend,
            current_season=settings.current_season,
        )

    yield

    if store is not None:
        await store.close()
        del app.state.economy_handler
        del app.state.economy_service
        logger.info("Economy service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[EconomyHandler, Depends(get_handler)]
ServiceDep = Annotated[EconomyService, Depends(get_economy_service)]

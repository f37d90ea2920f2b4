"""HTTP handlers for economy endpoints.

Handlers convert request DTOs into service calls and service results
into HTTP responses. They are the only place that knows which status
code an error kind becomes.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from economy_api.dto import (
    ErrorResponse,
    HealthCheckResponse,
    ItemDetailQuery,
    ItemsQuery,
    ListingsCountQuery,
    ListingsQuery,
)
from economy_api.result import Err, ErrorKind, Ok, Result
from economy_api.services import EconomyService

ERROR_STATUS = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DOWNSTREAM: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the uniform ``{"error": {"message": ...}}`` response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse.of(message).model_dump(),
    )


def to_response(result: Result) -> JSONResponse:
    """Map a service result to an HTTP response.

    Args:
        result: Ok or Err from the service layer

    Returns:
        200 with the payload for Ok, the mapped status and error body for Err
    """
    if isinstance(result, Ok):
        return JSONResponse(status_code=status.HTTP_200_OK, content=result.value)
    if isinstance(result, Err):
        return error_response(ERROR_STATUS[result.kind], result.message)
    raise TypeError(f"Unexpected service result: {result!r}")


class EconomyHandler:
    """HTTP handlers for economy operations.

    This handler delegates business logic to EconomyService
    and handles HTTP-specific concerns like:
    - Unpacking request DTOs
    - Setting appropriate status codes
    - Shaping error bodies

    Example:
        ```python
        handler = EconomyHandler(economy_service=service)

        @router.get("/items")
        async def get_items(season: int | None = None, days: int | None = None):
            return await handler.get_items(ItemsQuery(season=season, days=days))
        ```
    """

    def __init__(self, economy_service: EconomyService) -> None:
        """Initialize the economy handler.

        Args:
            economy_service: The economy service for business logic (required).
        """
        self._economy = economy_service

    async def get_items(self, query: ItemsQuery) -> JSONResponse:
        """Handle GET /items requests."""
        result = await self._economy.items_summary(season=query.season, days=query.days)
        return to_response(result)

    async def get_listings(self, query: ListingsQuery) -> JSONResponse:
        """Handle GET /listings/{item_name} requests.

        Returns:
            200 with the listings, 400 without a date selector, 500 on failure
        """
        result = await self._economy.listings(
            item_name=query.item_name,
            data_date=query.date,
            ingestion_date=query.ingestion_date,
            season=query.season,
        )
        return to_response(result)

    async def get_item_detail(self, query: ItemDetailQuery) -> JSONResponse:
        """Handle GET /items/{item_name} requests."""
        result = await self._economy.item_detail(
            item_name=query.item_name,
            season=query.season,
            limit=query.limit,
        )
        return to_response(result)

    async def get_listings_count(self, query: ListingsCountQuery) -> JSONResponse:
        """Handle GET /listings-count requests."""
        result = await self._economy.listings_count(season=query.season)
        return to_response(result)

    async def health_check(self) -> JSONResponse:
        """Handle GET /health requests.

        Returns:
            200 when both backends are reachable, 503 otherwise
        """
        checks = await self._economy.is_healthy()
        is_healthy = all(checks.values())

        body = HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_healthy=checks["cache"],
            store_healthy=checks["store"],
        )
        return JSONResponse(
            status_code=status.HTTP_200_OK if is_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body.to_payload(),
        )

"""Request validation shared by the economy routes.

Every economy route depends on ``validate_season``; validation failures
are rendered with the uniform error body by the handlers registered in
``register_error_handlers``.
"""

from fastapi import FastAPI, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from economy_api.handlers import error_response

INVALID_SEASON_MESSAGE = "Invalid season parameter"

# largest value a signed 32-bit INTEGER column holds
MAX_SEASON = 2**31 - 1
MAX_DAYS = 3650
MAX_LISTING_LIMIT = 1000


class InvalidParameterError(Exception):
    """A query or path parameter failed validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def validate_season(season: str | None = Query(None)) -> None:
    """Reject a present ``season`` that is not an integer in 1..MAX_SEASON.

    Args:
        season: Raw ``season`` query value

    Raises:
        InvalidParameterError: If the season is malformed or out of range
    """
    if season is None:
        return
    # isdigit() alone admits non-ASCII digits such as "²" that int() rejects
    if not (season.isascii() and season.isdigit()):
        raise InvalidParameterError(INVALID_SEASON_MESSAGE)
    if not 1 <= int(season) <= MAX_SEASON:
        raise InvalidParameterError(INVALID_SEASON_MESSAGE)


async def invalid_parameter_handler(request: Request, exc: InvalidParameterError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    name = errors[0]["loc"][-1] if errors and errors[0].get("loc") else "request"
    return error_response(status.HTTP_400_BAD_REQUEST, f"Invalid {name} parameter")


def register_error_handlers(app: FastAPI) -> None:
    """Render validation failures as ``{"error": {"message": ...}}`` with 400."""
    app.add_exception_handler(InvalidParameterError, invalid_parameter_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]

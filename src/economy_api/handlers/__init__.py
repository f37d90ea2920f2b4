"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .economy_handler import EconomyHandler, error_response, to_response

__all__ = [
    "EconomyHandler",
    "error_response",
    "to_response",
]

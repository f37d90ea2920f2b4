"""Explicit result types returned by the service layer.

Services return ``Ok`` or ``Err`` instead of raising, and handlers alone
decide which HTTP status an ``Err`` becomes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Failure categories a service operation can report."""

    INVALID_INPUT = "invalid_input"
    DOWNSTREAM = "downstream"


@dataclass(frozen=True)
class Ok:
    """Successful operation carrying a JSON-serializable payload."""

    value: Any


@dataclass(frozen=True)
class Err:
    """Failed operation.

    Attributes:
        kind: Failure category
        message: Client-safe message
    """

    kind: ErrorKind
    message: str


Result = Ok | Err

"""Domain errors raised by the service layer and their mapping to HTTP."""
from dataclasses import dataclass


class DashboardError(Exception):
    """Base class for expected, client-facing failures."""


class InvalidRequestError(DashboardError, ValueError):
    """Request is malformed in a way the body/query schema cannot express."""


class RecordNotFoundError(DashboardError, LookupError):
    """Referenced record or symbol does not exist."""

    def __init__(self, resource_name: str, identifier: object | None = None) -> None:
        self.resource_name = resource_name
        self.identifier = identifier
        if identifier is None:
            message = f"{resource_name} not found"
        else:
            message = f"{resource_name} '{identifier}' not found"
        super().__init__(message)


class OwnershipError(DashboardError, PermissionError):
    """Record exists but belongs to another user."""

    def __init__(self, resource_name: str, identifier: object) -> None:
        self.resource_name = resource_name
        self.identifier = identifier
        super().__init__(f"{resource_name} '{identifier}' is owned by another user")


class DuplicateSymbolError(DashboardError, ValueError):
    """Symbol is already on the user's watchlist."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Stock '{symbol}' already in watchlist")


@dataclass(frozen=True)
class ErrorMapper:
    """Maps domain errors to (status_code, detail) for HTTP responses.

    Ownership failures get a generic detail so the response does not reveal
    who owns the record.
    """

    forbidden_detail: str = "Unauthorized"

    def to_http(self, exc: Exception) -> tuple[int, str]:
        """Map a domain exception to (status_code, detail)."""
        if isinstance(exc, RecordNotFoundError):
            return (404, str(exc))
        if isinstance(exc, OwnershipError):
            return (403, self.forbidden_detail)
        if isinstance(exc, DuplicateSymbolError):
            return (409, str(exc))
        if isinstance(exc, InvalidRequestError):
            return (400, str(exc) or "Invalid request")
        return (500, "Internal server error")

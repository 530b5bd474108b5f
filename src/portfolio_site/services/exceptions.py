"""Error kinds raised by the record services."""

from __future__ import annotations


class PortfolioError(Exception):
    """Base class for expected, client-facing failures."""


class ValidationError(PortfolioError):
    """Raised when a required field is missing or empty.

    Attributes:
        field: Name of the offending field.
    """

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"{field} is required")


class NotFoundError(PortfolioError):
    """Raised when a record id does not exist."""

    def __init__(self, kind: str, record_id: int) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} {record_id} not found")

"""Domain error hierarchy for clean exception handling."""
from __future__ import annotations


class DomainError(Exception):
    """Base for all domain errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Invalid input or state."""


class ForbiddenError(DomainError):
    """The content source refused the operation (e.g., comments closed)."""


class ConfigurationError(DomainError):
    """Required configuration is absent (e.g., no WordPress base URL)."""


class ContentSourceError(DomainError):
    """Transport failure talking to the content API (network, non-2xx, GraphQL errors)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SchemaMismatchError(ContentSourceError):
    """The content API answered with a payload of unexpected shape."""

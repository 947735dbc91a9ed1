"""
Custom exceptions for the application.
"""
from typing import Any, Optional


class LexiconException(Exception):
    """Base exception for all Lexicon application exceptions."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None
    ):
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value


class ValidationError(LexiconException):
    """Raised when validation fails (field length, pattern, pagination bounds)."""
    pass


class NotFoundError(LexiconException):
    """Raised when a requested resource is not found."""
    pass


class ConflictError(LexiconException):
    """Raised when there's a conflict (e.g., duplicate entry)."""
    pass


class UpstreamError(LexiconException):
    """Raised when the machine translation provider fails."""
    pass

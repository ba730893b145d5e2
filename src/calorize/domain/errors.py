"""Exception hierarchy shared by every layer.

All application errors inherit from DomainError so callers can catch broad or
specific failures as needed.
"""


class DomainError(Exception):
    """Base exception for all application errors."""


class InvalidArgumentError(DomainError, ValueError):
    """Raised when a field value fails validation."""


class MissingValueError(InvalidArgumentError):
    """Raised when a required value is absent."""


class NotFoundError(DomainError, LookupError):
    """Raised when a referenced user or food does not exist."""


class AuthenticationError(DomainError):
    """Raised for bad credentials or an unknown session."""


class DataAccessError(DomainError):
    """Raised when a storage operation fails."""


class ConflictError(DataAccessError):
    """Raised when a write violates a uniqueness constraint."""


class CatalogLoadError(DataAccessError):
    """Raised when the food catalog file cannot be read or parsed."""

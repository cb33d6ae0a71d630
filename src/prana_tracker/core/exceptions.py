class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when required fields are missing or malformed."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class ConflictError(DomainError):
    """Raised when a write collides with a uniqueness rule (e.g. duplicate scholar ID)."""


class NotFoundError(DomainError):
    """Raised when an update targets a row that does not exist."""


class StorageError(DomainError):
    """Raised for any underlying persistence failure.

    The message is always generic; driver detail is logged, never returned to clients.
    """

    def __init__(self, message: str = "Database error"):
        super().__init__(message)

class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class CalendarExhaustedError(DomainError):
    """Raised when no business day can be found within the step limit.

    Almost always means the holiday data is wrong.
    """


class PersistenceError(DomainError):
    """Raised when the backing store fails to read or write."""

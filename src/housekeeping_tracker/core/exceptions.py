class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid (e.g. a bad row id)."""


class NotFoundError(DomainError):
    """Raised when a named table does not exist in the backing store."""


class TransientIOError(DomainError):
    """Raised when a call to the backing store fails. Not retried."""

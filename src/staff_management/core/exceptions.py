class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ReferenceNotFound(ValidationError):
    """Raised when a write references a shift that does not exist."""


class ReferenceInUse(ValidationError):
    """Raised when deleting a record that other records still point at."""


class NotFound(DomainError):
    """Raised when the target entity of an operation does not exist."""


class StorageError(DomainError):
    """Raised when the underlying store fails.

    The message is kept generic; details go to the log, not to the caller.
    """

    def __init__(self, message: str = "operation failed"):
        super().__init__(message)

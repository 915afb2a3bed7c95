# taskhub/core/domain/exceptions.py
from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of error kinds understood by every layer."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INFRASTRUCTURE = "infrastructure"
    UNEXPECTED = "unexpected"


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

# --- Caller-recoverable errors ---

class ValidationError(DomainError):
    """Raised when caller-supplied data violates an invariant."""
    kind = ErrorKind.VALIDATION

class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""
    kind = ErrorKind.NOT_FOUND

class AlreadyExistsError(DomainError):
    """Raised when a write collides with an identifier or a unique field."""
    kind = ErrorKind.ALREADY_EXISTS

# --- Opaque failures ---

class InfrastructureError(DomainError):
    """
    Raised by persistence adapters when the store fails.
    The message is safe to show; the underlying cause is only logged.
    """
    kind = ErrorKind.INFRASTRUCTURE

class UnexpectedError(DomainError):
    """Reserved for conditions not otherwise classified. Not raised by the core."""
    kind = ErrorKind.UNEXPECTED

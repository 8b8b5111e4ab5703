class DomainError(Exception):
    """Base exception for all domain-level errors."""

    pass


class InvalidPathError(DomainError):
    """Raised when a string cannot be decomposed into path components."""

    pass

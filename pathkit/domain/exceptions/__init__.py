from .domain_exceptions import DomainError, InvalidPathError

__all__ = [
    "DomainError",
    "InvalidPathError",
]

"""Immutable path and URI value objects."""

from pathkit.domain.value_objects.path_value import PathValue
from pathkit.domain.exceptions import DomainError, InvalidPathError

__version__ = "1.0.0"

__all__ = [
    "PathValue",
    "DomainError",
    "InvalidPathError",
]

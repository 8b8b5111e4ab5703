from .path_dtos import (
    PathComponents,
    InspectPathRequest,
    InspectPathResponse,
    PathOperation,
    PathOperationType,
    TransformPathRequest,
    TransformPathResponse,
)

__all__ = [
    "PathComponents",
    "InspectPathRequest",
    "InspectPathResponse",
    "PathOperation",
    "PathOperationType",
    "TransformPathRequest",
    "TransformPathResponse",
]

"""
Path Router - Endpoints for decomposing and transforming paths.
"""

from fastapi import APIRouter, HTTPException, status

from pathkit.application.dtos.path_dtos import (
    InspectPathRequest,
    InspectPathResponse,
    TransformPathRequest,
    TransformPathResponse,
)
from pathkit.domain.exceptions.domain_exceptions import InvalidPathError
from pathkit.presentation.api.dependencies import InspectUseCaseDep, TransformUseCaseDep

router = APIRouter(prefix="/paths", tags=["paths"])


@router.post(
    "/inspect",
    response_model=InspectPathResponse,
    summary="Decompose a path",
    description="Split a filesystem path or URI into its components.",
)
async def inspect_path(
    request: InspectPathRequest,
    use_case: InspectUseCaseDep,
):
    """Decompose a path or URI."""
    try:
        return await use_case.execute(request)
    except InvalidPathError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post(
    "/transform",
    response_model=TransformPathResponse,
    summary="Transform a path",
    description="Apply with_* operations in order and return the derived path.",
)
async def transform_path(
    request: TransformPathRequest,
    use_case: TransformUseCaseDep,
):
    """Derive a new path from the given one.

    The original path is never modified; the response carries both.
    """
    try:
        return await use_case.execute(request)
    except InvalidPathError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

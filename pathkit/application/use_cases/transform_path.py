import logging
import os
from dataclasses import dataclass
from typing import Callable, Dict

from pathkit.domain.value_objects.path_value import PathValue
from pathkit.application.interfaces.i_directory_service import IDirectoryService
from pathkit.application.dtos.path_dtos import (
    PathComponents,
    PathOperation,
    PathOperationType,
    TransformPathRequest,
    TransformPathResponse,
)

logger = logging.getLogger(__name__)

TRANSFORMERS: Dict[PathOperationType, Callable[[PathValue, str], PathValue]] = {
    PathOperationType.SCHEME: PathValue.with_scheme,
    PathOperationType.HOST: PathValue.with_host,
    PathOperationType.PORT: PathValue.with_port,
    PathOperationType.QUERY: PathValue.with_query,
    PathOperationType.DIR_SEPARATOR: PathValue.with_dir_separator,
    PathOperationType.PATH: PathValue.with_path,
    PathOperationType.PATH_ALL: PathValue.with_path_all,
    PathOperationType.BASENAME: PathValue.with_basename,
    PathOperationType.EXTENSION: PathValue.with_extension,
    PathOperationType.FILENAME: PathValue.with_filename,
}


def apply_operation(value: PathValue, operation: PathOperation) -> PathValue:
    """Apply one operation through the matching with_* transformer."""
    return TRANSFORMERS[operation.op](value, operation.value)


@dataclass
class TransformPathUseCase:
    """Use case for deriving a new path from an existing one."""

    directory_service: IDirectoryService
    default_separator: str = os.sep

    async def execute(self, request: TransformPathRequest) -> TransformPathResponse:
        """Apply the requested operations in order.

        1. Parse the path
        2. Apply each operation to the result of the previous one
        3. Optionally make sure the parent directory of the result exists
        """
        original = PathValue.parse(
            request.path, separator=request.separator or self.default_separator
        )

        result = original
        for operation in request.operations:
            result = apply_operation(result, operation)

        logger.debug(
            "Transformed %r into %r with %d operation(s)",
            original.render(),
            result.render(),
            len(request.operations),
        )

        directory_ready = None
        if request.ensure_directory:
            directory_ready = await self.directory_service.ensure_parent_directory(
                result.render()
            )

        return TransformPathResponse(
            original=PathComponents.from_value(original),
            result=PathComponents.from_value(result),
            unchanged=result is original,
            directory_ready=directory_ready,
        )

import logging
import os
from dataclasses import dataclass

from pathkit.domain.value_objects.path_value import PathValue
from pathkit.application.dtos.path_dtos import (
    InspectPathRequest,
    InspectPathResponse,
    PathComponents,
)

logger = logging.getLogger(__name__)


@dataclass
class InspectPathUseCase:
    """Use case for decomposing a path or URI into its components."""

    default_separator: str = os.sep

    async def execute(self, request: InspectPathRequest) -> InspectPathResponse:
        """Parse the path and describe it.

        Raises InvalidPathError when the path cannot be decomposed.
        """
        value = PathValue.parse(
            request.path, separator=request.separator or self.default_separator
        )
        logger.debug("Inspected %r as %r", request.path, value)

        return InspectPathResponse(
            components=PathComponents.from_value(value),
            rendered_with_prefix=value.render_with_prefix(request.prefix or ""),
        )

import asyncio
import logging
import os

from pathkit.application.interfaces.i_directory_service import IDirectoryService

logger = logging.getLogger(__name__)


class DirectoryService(IDirectoryService):
    """Best-effort creation of parent directories on the local filesystem."""

    def __init__(self, mode: int = 0o777):
        self.mode = mode

    async def ensure_parent_directory(self, file_path: str) -> bool:
        """Create the parent directory of a file path if it is missing."""
        # Run mkdir in a thread pool to not block
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self._ensure, file_path)

    def _ensure(self, file_path: str) -> bool:
        directory = os.path.dirname(file_path)
        if not directory or os.path.isdir(directory):
            return True

        try:
            os.makedirs(directory, mode=self.mode, exist_ok=True)
        except OSError as e:
            logger.warning("Could not create directory %s: %s", directory, e)
            return False

        logger.debug("Created directory %s", directory)
        return True

from abc import ABC, abstractmethod


class IDirectoryService(ABC):
    """Interface for preparing directories on disk."""

    @abstractmethod
    async def ensure_parent_directory(self, file_path: str) -> bool:
        """Make sure the parent directory of ``file_path`` exists.

        Failures are not raised; the return value tells whether the
        directory is there afterwards.
        """
        pass

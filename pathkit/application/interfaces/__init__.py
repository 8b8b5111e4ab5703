from .i_directory_service import IDirectoryService

__all__ = [
    "IDirectoryService",
]

from .path_router import router as path_router

__all__ = ["path_router"]

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from pathkit.domain.value_objects.path_value import PathValue


class PathOperationType(str, Enum):
    SCHEME = "scheme"
    HOST = "host"
    PORT = "port"
    QUERY = "query"
    DIR_SEPARATOR = "dir_separator"
    PATH = "path"
    PATH_ALL = "path_all"
    BASENAME = "basename"
    EXTENSION = "extension"
    FILENAME = "filename"


class PathComponents(BaseModel):
    """Every component of a path together with its renderings."""

    scheme: str
    host: str
    port: str
    query: str
    directory: List[str]
    basename: str
    filename: str
    extension: str
    separator: str
    path: str
    rendered: str
    full: str

    @classmethod
    def from_value(cls, value: PathValue) -> "PathComponents":
        return cls(
            scheme=value.scheme,
            host=value.host,
            port=value.port,
            query=value.query,
            directory=list(value.directory),
            basename=value.basename,
            filename=value.filename,
            extension=value.extension,
            separator=value.separator,
            path=value.path,
            rendered=value.render(),
            full=value.render_full(),
        )


class InspectPathRequest(BaseModel):
    """Request DTO for decomposing a path or URI."""

    path: str
    separator: Optional[str] = Field(default=None, min_length=1)
    prefix: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "path": "https://example.com/files/document.pdf?download=1",
                "separator": "/",
            }
        }


class InspectPathResponse(BaseModel):
    """Response DTO describing a decomposed path."""

    components: PathComponents
    rendered_with_prefix: str


class PathOperation(BaseModel):
    """A single transformation applied through the matching with_* method."""

    op: PathOperationType
    value: str


class TransformPathRequest(BaseModel):
    """Request DTO for applying a chain of transformations to a path."""

    path: str
    separator: Optional[str] = Field(default=None, min_length=1)
    operations: List[PathOperation] = Field(default_factory=list)
    ensure_directory: bool = False

    class Config:
        json_schema_extra = {
            "example": {
                "path": "temp/file.txt",
                "separator": "/",
                "operations": [
                    {"op": "path_all", "value": "storage"},
                    {"op": "path", "value": "2024/11"},
                    {"op": "extension", "value": "jpg"},
                ],
            }
        }


class TransformPathResponse(BaseModel):
    """Response DTO after transforming a path."""

    original: PathComponents
    result: PathComponents
    unchanged: bool
    directory_ready: Optional[bool] = None

import os
import re
from dataclasses import dataclass, replace
from typing import Tuple

from ..exceptions.domain_exceptions import InvalidPathError

# Generic URI components, RFC 3986 appendix B, with the scheme restricted to
# its RFC syntax so "my docs:x/y" stays a plain path.
URI_PATTERN = re.compile(
    r"(?:([A-Za-z][A-Za-z0-9+.\-]*):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#.*)?",
    re.DOTALL,
)


def _normalize(value: str) -> str:
    """Use forward slashes only and drop surrounding slashes."""
    return value.replace("\\", "/").strip("/")


def _split_netloc(netloc: str) -> Tuple[str, str]:
    """Split a network location into host and port text."""
    hostport = netloc.rpartition("@")[2]
    if hostport.startswith("["):
        host, bracket, rest = hostport.partition("]")
        if not bracket:
            raise InvalidPathError(
                f"Cannot decompose path: unterminated IPv6 host {netloc}"
            )
        host += "]"
        port = rest[1:] if rest.startswith(":") else ""
        return host, port
    host, _, port = hostport.partition(":")
    return host, port


def _split_basename(basename: str) -> Tuple[str, str]:
    """Split a basename into filename and extension at its last dot."""
    filename, dot, extension = basename.rpartition(".")
    if not dot:
        return basename, ""
    return filename, extension


@dataclass(frozen=True)
class PathValue:
    """Immutable value object representing a filesystem path or a URI.

    Every ``with_*`` method returns a new instance and leaves the receiver
    untouched. When the requested value equals the current one the receiver
    itself is returned, so callers comparing by identity can detect no-ops.
    """

    scheme: str = ""
    host: str = ""
    port: str = ""
    query: str = ""
    directory: Tuple[str, ...] = ()
    basename: str = ""
    filename: str = ""
    extension: str = ""
    separator: str = os.sep

    @classmethod
    def parse(cls, value: str, separator: str = os.sep) -> "PathValue":
        """Decompose a plain path or a full URI into its components.

        Components are taken verbatim: no case folding, no whitespace or
        control character cleanup. Every string matches the generic URI
        pattern, so the only rejection is an unterminated IPv6 host.
        """
        value = _normalize(value)
        scheme, netloc, path, query = URI_PATTERN.fullmatch(value).groups()

        host, port = _split_netloc(netloc or "")
        head, slash, basename = path.strip("/").rpartition("/")
        directory = tuple(head.split("/")) if slash else ()
        filename, extension = _split_basename(basename)

        return cls(
            scheme=scheme or "",
            host=host,
            port=port,
            query=query or "",
            directory=directory,
            basename=basename,
            filename=filename,
            extension=extension,
            separator=separator,
        )

    @property
    def path(self) -> str:
        """Get the directory part joined by the separator."""
        return self.separator.join(self.directory)

    def with_scheme(self, scheme: str) -> "PathValue":
        if scheme == self.scheme:
            return self
        return replace(self, scheme=scheme)

    def with_host(self, host: str) -> "PathValue":
        if host == self.host:
            return self
        return replace(self, host=host)

    def with_port(self, port: str) -> "PathValue":
        if port == self.port:
            return self
        return replace(self, port=port)

    def with_query(self, query: str) -> "PathValue":
        """Append a query string, joining with '&' when one is already set."""
        if query == self.query:
            return self
        if self.query:
            query = f"{self.query}&{query}"
        return replace(self, query=query)

    def with_dir_separator(self, separator: str) -> "PathValue":
        """Change the separator used when rendering, not the stored segments."""
        if separator == self.separator:
            return self
        return replace(self, separator=separator)

    def with_path(self, directory: str) -> "PathValue":
        """Append the segments of ``directory`` to the current directory."""
        segments = tuple(_normalize(directory).split("/"))
        return replace(self, directory=self.directory + segments)

    def with_path_all(self, directory: str) -> "PathValue":
        """Replace the whole directory part."""
        directory = _normalize(directory)
        if "/".join(self.directory) == directory:
            return self
        return replace(self, directory=tuple(directory.split("/")))

    def with_basename(self, basename: str) -> "PathValue":
        """Set basename and extension.

        Only the first two dot-separated parts are looked at, so
        ``archive.tar.gz`` gets the extension ``tar``. A basename without an
        extension part is ignored. The filename is left as it was.
        """
        parts = basename.split(".")
        if basename == self.basename or len(parts) < 2 or not parts[1]:
            return self
        return replace(self, basename=basename, extension=parts[1])

    def with_extension(self, extension: str) -> "PathValue":
        if extension == self.extension:
            return self
        return replace(
            self, extension=extension, basename=f"{self.filename}.{extension}"
        )

    def with_filename(self, filename: str) -> "PathValue":
        if filename == self.filename:
            return self
        return replace(
            self, filename=filename, basename=f"{filename}.{self.extension}"
        )

    def render(self) -> str:
        """Join directory and basename with the separator."""
        rendered = self.separator.join(self.directory)
        if self.basename:
            if rendered:
                rendered += self.separator + self.basename
            else:
                rendered = self.basename
        return rendered

    def render_with_prefix(self, prefix: str = "") -> str:
        """Render the path below ``prefix``."""
        if not prefix:
            return self.render()
        return prefix.strip("/") + self.separator + self.render()

    def render_full(self) -> str:
        """Render scheme, host, port, path and query.

        The authority is followed by the configured separator rather than a
        fixed '/'.
        """
        uri = self.scheme
        if self.host:
            uri += "://" + self.host
        if self.port:
            uri += ":" + self.port
        if uri:
            uri += self.separator
        uri += self.render()
        if self.query:
            uri += "?" + self.query
        return uri

    def __str__(self) -> str:
        return self.render()

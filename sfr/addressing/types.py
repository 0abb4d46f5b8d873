"""
Data types for the addressing system.

Defines core types for locator parsing and resource resolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Optional

from .errors import ResolutionConfigError

if TYPE_CHECKING:
    from ..streams.providers import ResourceProvider


class Scheme(Enum):
    """Resolution strategy selected by a locator prefix."""
    CLASSPATH = "classpath:"
    FILESYSTEM = "file:"
    LOCAL_RELATIVE = "this:"
    ROOT_RELATIVE = ""           # no prefix

    @property
    def prefix(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParsedLocator:
    """
    Result of splitting a raw locator.

    The tag filter, when present, starts with '@'.
    """
    path: str
    tag_filter: Optional[str] = None


@dataclass(frozen=True)
class PathContext:
    """
    Reference points for relative resolution, fixed for one running feature.
    """
    local_parent: Path                  # Directory of the file issuing the read
    root_parent: Optional[Path] = None  # Directory of the first feature of the run

    def require_local(self) -> Path:
        if self.local_parent is None:
            raise ResolutionConfigError(
                message="Local feature directory is not set",
                hint="Create the reader for a concrete feature file",
            )
        return self.local_parent

    def require_root(self) -> Path:
        if self.root_parent is None:
            raise ResolutionConfigError(
                message="Root feature directory is not set",
                hint="Use 'this:' or 'classpath:' when reading outside a run",
            )
        return self.root_parent

    def __repr__(self) -> str:
        return f"PathContext(local={str(self.local_parent)!r}, root={str(self.root_parent)!r})"


@dataclass(frozen=True)
class ResourceHandle:
    """
    Lazily resolved resource.

    Building a handle never touches the disk; only open_stream() may fail.
    """
    scheme: Scheme
    path: str                              # Path with scheme prefix stripped
    raw: str                               # Path as written by the caller
    location: Optional[Path] = None        # Normalized file path (not for classpath)
    provider: Optional["ResourceProvider"] = None

    @property
    def is_classpath(self) -> bool:
        return self.scheme is Scheme.CLASSPATH

    @property
    def name(self) -> str:
        """File name part of the resource."""
        if self.location is not None:
            return self.location.name
        return self.path.rsplit("/", 1)[-1]

    def open_stream(self) -> BinaryIO:
        """
        Open the resource through its scheme-specific mechanism.

        Raises:
            FileNotFoundError: Classpath resource not found on any root
            OSError: File cannot be opened
        """
        if self.is_classpath:
            stream = self.provider.open_by_path(self.path) if self.provider is not None else None
            if stream is None:
                raise FileNotFoundError(self.raw)
            return stream
        return self.location.open("rb")

    def __repr__(self) -> str:
        target = self.location if self.location is not None else self.path
        return f"ResourceHandle({self.scheme.name}, {str(target)!r})"


__all__ = [
    "Scheme",
    "ParsedLocator",
    "PathContext",
    "ResourceHandle",
]

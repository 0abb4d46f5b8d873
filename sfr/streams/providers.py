"""
Resource providers: the "find this path on any configured root" capability.

Providers are injected into the reader instead of being looked up globally,
and hold only immutable state so one instance can serve many readers.
"""

from __future__ import annotations

from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional, Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class ResourceProvider(Protocol):
    """Lookup of resources by root-relative path."""

    def open_by_path(self, path: str) -> Optional[BinaryIO]:
        """Open the resource as a binary stream, or return None if absent."""
        ...

    def locate(self, path: str) -> Optional[Path]:
        """Return the resource location on disk, or None if unknown."""
        ...


def _clean(path: str) -> str:
    return path.lstrip("/")


class SearchPathResourceProvider:
    """Looks a path up in an ordered list of filesystem roots."""

    def __init__(self, roots: Iterable[Path]):
        self.roots: Tuple[Path, ...] = tuple(Path(r).absolute() for r in roots)

    def locate(self, path: str) -> Optional[Path]:
        rel = _clean(path)
        for root in self.roots:
            candidate = root / rel
            if candidate.is_file():
                return candidate
        return None

    def open_by_path(self, path: str) -> Optional[BinaryIO]:
        found = self.locate(path)
        return found.open("rb") if found is not None else None

    def __repr__(self) -> str:
        return f"SearchPathResourceProvider({[str(r) for r in self.roots]!r})"


class PackageResourceProvider:
    """
    Looks a path up inside importable packages (importlib.resources).

    Packages are imported at construction, so a misspelled package name
    fails early rather than on the first read.
    """

    def __init__(self, packages: Iterable[str]):
        self.packages: Tuple[str, ...] = tuple(packages)
        self._roots: List[Traversable] = [resources.files(p) for p in self.packages]

    def _find(self, path: str) -> Optional[Traversable]:
        rel = _clean(path)
        for root in self._roots:
            candidate = root.joinpath(rel)
            if candidate.is_file():
                return candidate
        return None

    def locate(self, path: str) -> Optional[Path]:
        found = self._find(path)
        # Zipped packages have no filesystem location
        return found if isinstance(found, Path) else None

    def open_by_path(self, path: str) -> Optional[BinaryIO]:
        found = self._find(path)
        return found.open("rb") if found is not None else None

    def __repr__(self) -> str:
        return f"PackageResourceProvider({list(self.packages)!r})"


class ChainResourceProvider:
    """First provider that knows the path wins."""

    def __init__(self, providers: Sequence[ResourceProvider] = ()):
        self.providers: Tuple[ResourceProvider, ...] = tuple(providers)

    def locate(self, path: str) -> Optional[Path]:
        for p in self.providers:
            found = p.locate(path)
            if found is not None:
                return found
        return None

    def open_by_path(self, path: str) -> Optional[BinaryIO]:
        for p in self.providers:
            stream = p.open_by_path(path)
            if stream is not None:
                return stream
        return None

    def __repr__(self) -> str:
        return f"ChainResourceProvider({list(self.providers)!r})"


__all__ = [
    "ResourceProvider",
    "SearchPathResourceProvider",
    "PackageResourceProvider",
    "ChainResourceProvider",
]

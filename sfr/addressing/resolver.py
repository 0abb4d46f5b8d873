"""
Resource resolver for the addressing system.

Classifies a locator path by its scheme prefix and turns it into
a ResourceHandle using the PathContext for relative resolution.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

from .types import PathContext, ResourceHandle, Scheme

_LOG = logging.getLogger(__name__)

# Prefixed schemes in precedence order; anything else is root-relative.
_PREFIXED_SCHEMES: Tuple[Scheme, ...] = (
    Scheme.CLASSPATH,
    Scheme.FILESYSTEM,
    Scheme.LOCAL_RELATIVE,
)


def classify(path: str) -> Tuple[Scheme, str]:
    """
    Determine the scheme of a path and strip its prefix.

    Returns:
        (scheme, path without prefix)
    """
    for scheme in _PREFIXED_SCHEMES:
        if path.startswith(scheme.prefix):
            return scheme, path[len(scheme.prefix):]
    return Scheme.ROOT_RELATIVE, path


def remove_prefix(path: str) -> str:
    """Drop everything up to and including the first ':'."""
    pos = path.find(":")
    return path if pos == -1 else path[pos + 1:]


def _normalize(path: Path) -> Path:
    # Lexical only: no symlinks followed, no existence required
    return Path(os.path.normpath(path))


class ResourceResolver:
    """
    Transforms a locator path into a ResourceHandle.

    The handle is not opened here; a missing file only surfaces
    when a stream is requested.
    """

    def __init__(self, provider=None, logger: Optional[logging.Logger] = None):
        """
        Initialize resolver.

        Args:
            provider: ResourceProvider used for classpath lookups
            logger: Diagnostics sink (module logger by default)
        """
        self.provider = provider
        self.log = logger or _LOG

    def resolve(self, path: str, context: PathContext) -> ResourceHandle:
        """
        Resolve path in context.

        Raises:
            ResolutionConfigError: The context cannot serve the path's scheme
        """
        scheme, rest = classify(path)

        if scheme is Scheme.CLASSPATH:
            return ResourceHandle(scheme=scheme, path=rest, raw=path, provider=self.provider)

        if scheme is Scheme.FILESYSTEM:
            location = _normalize(Path(rest))
        elif scheme is Scheme.LOCAL_RELATIVE:
            location = _normalize(context.require_local() / rest)
        else:
            location = self._resolve_root_relative(rest, context)

        return ResourceHandle(
            scheme=scheme,
            path=rest,
            raw=path,
            location=location,
            provider=self.provider,
        )

    def _resolve_root_relative(self, path: str, context: PathContext) -> Path:
        try:
            return _normalize(context.require_root() / path)
        except Exception as e:
            self.log.error("feature relative path resolution failed: %s", e)
            raise


__all__ = ["ResourceResolver", "classify", "remove_prefix"]

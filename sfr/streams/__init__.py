"""
Byte stream access for resolved resources.
"""

from .providers import (
    ResourceProvider,
    SearchPathResourceProvider,
    PackageResourceProvider,
    ChainResourceProvider,
)

from .reader import StreamReader, NotFoundError, NOT_FOUND_TEMPLATE


__all__ = [
    "ResourceProvider",
    "SearchPathResourceProvider",
    "PackageResourceProvider",
    "ChainResourceProvider",
    "StreamReader",
    "NotFoundError",
    "NOT_FOUND_TEMPLATE",
]

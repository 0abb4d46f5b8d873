"""
Addressing system for scenario file reads.

Provides a unified API for parsing locators and resolving them
to resource handles.
"""

from .types import (
    Scheme,
    ParsedLocator,
    PathContext,
    ResourceHandle,
)

from .parser import LocatorParser, parse_locator

from .resolver import ResourceResolver, classify, remove_prefix

from .context import context_for_feature, context_for_directory, child_context

from .errors import AddressingError, ResolutionConfigError


__all__ = [
    # Types
    "Scheme",
    "ParsedLocator",
    "PathContext",
    "ResourceHandle",

    # Main classes
    "LocatorParser",
    "ResourceResolver",

    # Helpers
    "parse_locator",
    "classify",
    "remove_prefix",
    "context_for_feature",
    "context_for_directory",
    "child_context",

    # Exceptions
    "AddressingError",
    "ResolutionConfigError",
]

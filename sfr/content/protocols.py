"""
Collaborator interfaces used by the content dispatcher.

The dispatcher only decides WHICH collaborator interprets a resource;
how the content is parsed is up to the collaborator.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from ..addressing.types import ResourceHandle


@runtime_checkable
class ExpressionEvaluator(Protocol):
    """Turns JSON, XML or script text into a value."""

    def evaluate(self, text: str) -> Any:
        ...


@runtime_checkable
class ScriptNormalizer(Protocol):
    """Fixes bare function bodies into a callable form before evaluation."""

    def fix_function_literal(self, text: str) -> str:
        ...


@runtime_checkable
class Document(Protocol):
    """Parsed sub-document that can be scoped by a tag filter."""

    def set_tag_filter(self, tag: Optional[str]) -> None:
        ...


@runtime_checkable
class DocumentParser(Protocol):
    """Parses a feature-like resource into a Document."""

    def parse(self, handle: ResourceHandle) -> Document:
        ...


@runtime_checkable
class StructuredDataCodec(Protocol):
    """Converts tabular and YAML text into plain data."""

    def from_csv(self, text: str) -> Any:
        ...

    def from_yaml(self, text: str) -> Any:
        ...


__all__ = [
    "ExpressionEvaluator",
    "ScriptNormalizer",
    "Document",
    "DocumentParser",
    "StructuredDataCodec",
]

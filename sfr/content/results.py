"""
Dispatch results: the tagged union handed back to callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class ResultKind(Enum):
    STRUCTURED = "structured"
    TEXT = "text"
    SUB_DOCUMENT = "sub_document"
    RAW_BYTES = "raw_bytes"


@dataclass(frozen=True)
class DispatchResult:
    """Base of all results; `value` is what the caller ultimately uses."""
    kind: ClassVar[ResultKind]
    value: Any


@dataclass(frozen=True)
class StructuredValue(DispatchResult):
    kind: ClassVar[ResultKind] = ResultKind.STRUCTURED


@dataclass(frozen=True)
class Text(DispatchResult):
    kind: ClassVar[ResultKind] = ResultKind.TEXT
    value: str


@dataclass(frozen=True)
class SubDocument(DispatchResult):
    kind: ClassVar[ResultKind] = ResultKind.SUB_DOCUMENT


@dataclass(frozen=True)
class RawBytes(DispatchResult):
    kind: ClassVar[ResultKind] = ResultKind.RAW_BYTES
    value: bytes


__all__ = [
    "ResultKind",
    "DispatchResult",
    "StructuredValue",
    "Text",
    "SubDocument",
    "RawBytes",
]

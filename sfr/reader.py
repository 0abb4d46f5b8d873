"""
Scenario file reader: the per-feature entry point.

Wires locator parsing, resolution, stream access and content dispatch
for one running feature.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, BinaryIO, Optional

from .addressing import (
    LocatorParser,
    PathContext,
    ResourceHandle,
    ResourceResolver,
    context_for_feature,
)
from .config import ReaderConfig
from .content import (
    ContentDispatcher,
    DispatchResult,
    DocumentParser,
    ExpressionEvaluator,
    ScriptNormalizer,
    StructuredDataCodec,
)
from .streams import NotFoundError, ResourceProvider, StreamReader

_LOG = logging.getLogger(__name__)


class ScenarioFileReader:
    """
    Reads files referenced from a feature.

    Bound to one feature's PathContext; not meant to be shared across threads.
    """

    def __init__(
        self,
        context: PathContext,
        provider: Optional[ResourceProvider] = None,
        *,
        encoding: str = "utf-8",
        evaluator: Optional[ExpressionEvaluator] = None,
        normalizer: Optional[ScriptNormalizer] = None,
        document_parser: Optional[DocumentParser] = None,
        codec: Optional[StructuredDataCodec] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.context = context
        self.provider = provider
        self.log = logger or _LOG
        self.parser = LocatorParser()
        self.resolver = ResourceResolver(provider, logger=logger)
        self.streams = StreamReader(provider, encoding=encoding, logger=logger)
        self.dispatcher = ContentDispatcher(
            self.streams,
            evaluator=evaluator,
            normalizer=normalizer,
            document_parser=document_parser,
            codec=codec,
            logger=logger,
        )

    @classmethod
    def for_feature(
        cls,
        feature_file: Path,
        root_feature: Optional[Path] = None,
        config: Optional[ReaderConfig] = None,
        **kwargs: Any,
    ) -> "ScenarioFileReader":
        """Build a reader for a feature file using the given (or default) config."""
        config = config or ReaderConfig()
        kwargs.setdefault("encoding", config.encoding)
        return cls(
            context_for_feature(feature_file, root_feature),
            config.build_provider(),
            **kwargs,
        )

    # -------------------- Content --------------------

    def read(self, locator: str) -> DispatchResult:
        """Read a locator and return the typed dispatch result."""
        parsed = self.parser.parse(locator)
        handle = self.to_resource(parsed.path)
        return self.dispatcher.dispatch(parsed, handle)

    def read_file(self, locator: str) -> Any:
        """Read a locator and return the ready-to-use value."""
        return self.read(locator).value

    # -------------------- Raw access --------------------

    def to_resource(self, path: str) -> ResourceHandle:
        return self.resolver.resolve(path, self.context)

    def read_file_as_stream(self, path: str) -> BinaryIO:
        return self.streams.open_stream(self.to_resource(path))

    def read_file_as_bytes(self, path: str) -> bytes:
        return self.streams.read_bytes(self.to_resource(path))

    def read_file_as_string(self, path: str) -> str:
        return self.streams.read_string(self.to_resource(path))

    # -------------------- Paths --------------------

    def relative_path_to_file(self, path: str) -> Path:
        """
        Filesystem path of the resource.

        Raises:
            NotFoundError: Classpath resource without a location on disk
        """
        handle = self.to_resource(path)
        if handle.location is not None:
            return handle.location
        located = self.provider.locate(handle.path) if self.provider is not None else None
        if located is None:
            raise NotFoundError(path)
        return located

    def to_absolute_path(self, path: str) -> str:
        return os.path.normpath(self.relative_path_to_file(path).absolute())

    def __repr__(self) -> str:
        return f"ScenarioFileReader({self.context!r})"


__all__ = ["ScenarioFileReader"]

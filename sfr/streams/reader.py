"""
Stream reader: opens resource handles with a provider fallback.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Optional

from ..addressing.resolver import remove_prefix
from ..addressing.types import ResourceHandle
from ..errors import SFRUserError
from ..logs import trace
from .providers import ResourceProvider

_LOG = logging.getLogger(__name__)

NOT_FOUND_TEMPLATE = "could not find or read file: {path}"

_BOM = "\ufeff"


class NotFoundError(SFRUserError):
    """Neither the handle nor the resource provider yielded a stream."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(NOT_FOUND_TEMPLATE.format(path=path))


class StreamReader:
    """
    Opens handles as byte streams and converts them to bytes or text.

    Direct resolution is tried first; on any failure the path is looked up
    again through the resource provider with its scheme prefix removed.
    """

    def __init__(
        self,
        provider: Optional[ResourceProvider] = None,
        encoding: str = "utf-8",
        logger: Optional[logging.Logger] = None,
    ):
        self.provider = provider
        self.encoding = encoding
        self.log = logger or _LOG

    def open_stream(self, handle: ResourceHandle) -> BinaryIO:
        """
        Open the resource. The caller owns (and must close) the stream.

        Raises:
            NotFoundError: Resource not found by either mechanism
        """
        try:
            return handle.open_stream()
        except Exception as e:
            stream = self._open_fallback(handle.raw)
            if stream is None:
                message = NOT_FOUND_TEMPLATE.format(path=handle.raw)
                trace(self.log, "%s", message)
                raise NotFoundError(handle.raw) from e
            return stream

    def _open_fallback(self, raw: str) -> Optional[BinaryIO]:
        if self.provider is None:
            return None
        return self.provider.open_by_path(remove_prefix(raw))

    def read_bytes(self, handle: ResourceHandle) -> bytes:
        with self.open_stream(handle) as stream:
            return stream.read()

    def read_string(self, handle: ResourceHandle) -> str:
        text = self.read_bytes(handle).decode(self.encoding)
        if text.startswith(_BOM):
            text = text[len(_BOM):]
        return text


__all__ = ["StreamReader", "NotFoundError", "NOT_FOUND_TEMPLATE"]

"""
In-memory resource provider for tests.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO, Dict, List, Optional


class MemoryProvider:
    """Serves resources from a dict and records every lookup."""

    def __init__(self, files: Optional[Dict[str, bytes]] = None):
        self.files: Dict[str, bytes] = dict(files or {})
        self.lookups: List[str] = []

    def open_by_path(self, path: str) -> Optional[BinaryIO]:
        self.lookups.append(path)
        data = self.files.get(path)
        return io.BytesIO(data) if data is not None else None

    def locate(self, path: str) -> Optional[Path]:
        return None


__all__ = ["MemoryProvider"]

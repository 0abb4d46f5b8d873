"""
Shared test infrastructure.

Modules:
- file_utils: creating files and directories
- providers: in-memory resource provider
"""

from .file_utils import write, write_bytes, write_feature
from .providers import MemoryProvider

__all__ = ["write", "write_bytes", "write_feature", "MemoryProvider"]

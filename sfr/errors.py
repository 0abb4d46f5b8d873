"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from SFRUserError.

Programming errors and errors raised by content parsers
(JSON, XML, YAML, CSV) are NOT wrapped, they propagate unchanged.
"""

from __future__ import annotations


class SFRUserError(Exception):
    """
    Base class for all user-facing errors of the scenario file reader.

    These errors indicate problems that the user can fix:
    misconfigured runs, missing files, invalid feature documents, etc.
    """
    pass


__all__ = ["SFRUserError"]

"""
Exceptions for the addressing system.
"""

from __future__ import annotations

from typing import Optional

from ..errors import SFRUserError


class AddressingError(SFRUserError):
    """Base error of locator parsing and resolution."""

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        text = message
        if hint:
            text += f"\n  Hint: {hint}"
        super().__init__(text)


class ResolutionConfigError(AddressingError):
    """
    The path context of the run cannot be used for resolution.

    This is a configuration error, not a missing-file condition.
    """
    pass


__all__ = ["AddressingError", "ResolutionConfigError"]

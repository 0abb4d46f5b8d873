"""
Locator parser for the addressing system.

Splits a raw locator into a path and an optional tag filter.
Does NOT perform resolution, only syntactic splitting.
"""

from __future__ import annotations

from .types import ParsedLocator

TAG_MARKER = "@"


class LocatorParser:
    """
    Parser for locators such as 'this:child.feature@smoke'.

    The first '@' starts the tag filter. There is no escape for a literal '@'
    in a file name.
    """

    def parse(self, raw: str) -> ParsedLocator:
        """
        Split a raw locator.

        Args:
            raw: Locator as written by the test author

        Returns:
            ParsedLocator with trimmed path and tag filter (or None)
        """
        pos = raw.find(TAG_MARKER)
        if pos == -1:
            return ParsedLocator(path=raw.strip())
        return ParsedLocator(
            path=raw[:pos].strip(),
            tag_filter=raw[pos:].strip(),
        )


def parse_locator(raw: str) -> ParsedLocator:
    """Module-level shortcut for LocatorParser().parse()."""
    return LocatorParser().parse(raw)


__all__ = ["LocatorParser", "parse_locator", "TAG_MARKER"]

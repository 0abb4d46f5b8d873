"""
Version lookup for the installed distribution.

Kept free of other sfr imports so the CLI can use it before anything else loads.
"""

from __future__ import annotations

from importlib import metadata

DIST_NAME = "scenario-file-reader"
UNKNOWN_VERSION = "0.0.0"


def _dist_version(dist: str) -> str | None:
    try:
        return metadata.version(dist)
    except metadata.PackageNotFoundError:
        return None


def tool_version() -> str:
    """Version of this package, or 0.0.0 when running from a plain checkout."""
    return _dist_version(DIST_NAME) or UNKNOWN_VERSION


def version_banner() -> str:
    """
    Version line for `sfr --version`.

    Includes the version of the YAML library used for data files.
    """
    yaml_version = _dist_version("ruamel.yaml") or "missing"
    return f"{tool_version()} (ruamel.yaml {yaml_version})"


__all__ = ["DIST_NAME", "tool_version", "version_banner"]

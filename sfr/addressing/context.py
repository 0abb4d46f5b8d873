"""
Path context factories.

A PathContext is built once per running feature from the file being
executed and the feature that started the run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .errors import ResolutionConfigError
from .types import PathContext


def _parent_of(file_path: Path) -> Path:
    return file_path.absolute().parent


def context_for_feature(feature_file: Path, root_feature: Optional[Path] = None) -> PathContext:
    """
    Build the context for a feature.

    Args:
        feature_file: File currently being executed
        root_feature: First feature of the run's call chain
            (defaults to feature_file for a top-level feature)

    Raises:
        ResolutionConfigError: feature_file is a directory
    """
    if feature_file.is_dir():
        raise ResolutionConfigError(
            message=f"Expected a feature file, got a directory: {feature_file}",
        )
    root = root_feature if root_feature is not None else feature_file
    return PathContext(local_parent=_parent_of(feature_file), root_parent=_parent_of(root))


def context_for_directory(directory: Path, root_directory: Optional[Path] = None) -> PathContext:
    """
    Build a context from directories directly (no feature files).

    Useful for ad-hoc reads; root_directory may be omitted, in which case
    plain paths cannot be resolved.
    """
    root = root_directory.absolute() if root_directory is not None else None
    return PathContext(local_parent=directory.absolute(), root_parent=root)


def child_context(parent: PathContext, called_feature: Path) -> PathContext:
    """
    Context for a feature called from another one.

    The local parent moves to the called feature, the root parent is kept.
    """
    return PathContext(local_parent=_parent_of(called_feature), root_parent=parent.root_parent)


__all__ = ["context_for_feature", "context_for_directory", "child_context"]

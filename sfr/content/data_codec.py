"""
Default structured-data codec: CSV rows and YAML documents to plain data.
"""

from __future__ import annotations

import csv
import io
from typing import Any, Dict, List

from ruamel.yaml import YAML


class DefaultCodec:
    """
    Holds its own YAML loader; ruamel loaders are stateful and
    must not be shared between threads.
    """

    def __init__(self) -> None:
        self._yaml = YAML(typ="safe")

    def from_csv(self, text: str) -> List[Dict[str, str]]:
        """First row is the header; every further row becomes a dict of strings."""
        reader = csv.DictReader(io.StringIO(text))
        return [dict(row) for row in reader]

    def from_yaml(self, text: str) -> Any:
        return self._yaml.load(text)


__all__ = ["DefaultCodec"]

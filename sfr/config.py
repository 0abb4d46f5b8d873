from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import SFRUserError
from .paths import config_path
from .streams.providers import ChainResourceProvider, PackageResourceProvider, SearchPathResourceProvider

_yaml = YAML(typ="safe")


class ConfigError(SFRUserError):
    """Raised when sfr.yaml cannot be read or has the wrong shape."""
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Invalid config {path}: {reason}")


@dataclass
class ReaderConfig:
    """
    Reader settings.

    classpath_roots: filesystem directories searched for classpath resources
    packages: importable packages searched for classpath resources
    encoding: text encoding of read files
    """
    classpath_roots: List[Path] = field(default_factory=list)
    packages: List[str] = field(default_factory=list)
    encoding: str = "utf-8"

    def build_provider(self) -> ChainResourceProvider:
        """Filesystem roots first, then packages."""
        providers = []
        if self.classpath_roots:
            providers.append(SearchPathResourceProvider(self.classpath_roots))
        if self.packages:
            providers.append(PackageResourceProvider(self.packages))
        return ChainResourceProvider(providers)


def _str_list(path: Path, data: dict, key: str) -> List[str]:
    val: Any = data.get(key, [])
    if isinstance(val, str):
        val = [val]
    if not isinstance(val, list) or not all(isinstance(v, str) for v in val):
        raise ConfigError(path, f"'{key}' must be a string or a list of strings")
    return list(val)


def load_config_file(path: Path) -> ReaderConfig:
    """
    Load sfr.yaml. Relative classpath roots are taken from the file's directory.
    """
    try:
        data = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise ConfigError(path, str(e)) from e
    except YAMLError as e:
        raise ConfigError(path, f"YAML error: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(path, "top level must be a mapping")

    base = path.parent
    roots = [(base / r) for r in _str_list(path, data, "classpath")]
    encoding = data.get("encoding", "utf-8")
    if not isinstance(encoding, str):
        raise ConfigError(path, "'encoding' must be a string")

    return ReaderConfig(
        classpath_roots=roots,
        packages=_str_list(path, data, "packages"),
        encoding=encoding,
    )


def load_config(cwd: Optional[Path] = None) -> ReaderConfig:
    """Config from $SFR_CONFIG / ./sfr.yaml, or defaults when there is none."""
    path = config_path(cwd)
    if path is None:
        return ReaderConfig()
    return load_config_file(path)


__all__ = ["ReaderConfig", "ConfigError", "load_config", "load_config_file"]

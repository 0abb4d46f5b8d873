"""
Path utilities for the scenario file reader.

Single source of truth for configuration file lookup.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

# Configuration file name
CFG_FILE = "sfr.yaml"
CFG_ENV = "SFR_CONFIG"


def config_path(cwd: Optional[Path] = None) -> Optional[Path]:
    """
    Configuration file to use: $SFR_CONFIG if set, else sfr.yaml in cwd.
    Returns None when neither exists.
    """
    env = os.environ.get(CFG_ENV)
    if env:
        return Path(env).absolute()
    candidate = (cwd or Path.cwd()) / CFG_FILE
    return candidate.absolute() if candidate.is_file() else None

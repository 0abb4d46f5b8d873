from __future__ import annotations

import logging
import os

TRACE = 5
LOG_LEVEL_ENV = "SFR_LOG_LEVEL"

logging.addLevelName(TRACE, "TRACE")

# -------------------- Logging setup --------------------

_LOG = logging.getLogger("sfr")


def _level_from_env() -> int:
    raw = (os.environ.get(LOG_LEVEL_ENV) or "").strip().upper()
    if not raw:
        return logging.WARNING
    if raw == "TRACE":
        return TRACE
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging_once() -> None:
    if getattr(setup_logging_once, "_inited", False):
        return
    setup_logging_once._inited = True  # type: ignore[attr-defined]
    _LOG.setLevel(_level_from_env())
    if not _LOG.handlers:
        h = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        h.setFormatter(fmt)
        _LOG.addHandler(h)


def trace(logger: logging.Logger, msg: str, *args: object) -> None:
    """Log at TRACE level (below DEBUG)."""
    if logger.isEnabledFor(TRACE):
        logger.log(TRACE, msg, *args)


__all__ = ["TRACE", "LOG_LEVEL_ENV", "setup_logging_once", "trace"]

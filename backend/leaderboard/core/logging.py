"""Logging bootstrap for the API process.

Installs one stream handler on the root logger and keeps the uvicorn loggers
at the same level. Calling it twice is a no-op unless ``force`` is set.
"""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_configured = False


def _level_from_str(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str = "INFO", *, force: bool = False) -> None:
    global _configured
    if _configured and not force:
        return

    lvl = _level_from_str(level)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.setLevel(lvl)
    root.addHandler(handler)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(max(lvl, logging.INFO))

    _configured = True

"""Process entry point: ``python -m leaderboard`` or the ``leaderboard-api`` script.

Host and port come from settings (``PORT`` falls back to 3000). If the store is
unreachable the lifespan hook raises, uvicorn aborts startup and the process
exits non-zero.
"""

from __future__ import annotations

import logging

import uvicorn

from leaderboard.core.config import get_settings
from leaderboard.core.logging import configure_logging

_LOGGER = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    _LOGGER.info("Server starting on port %s", settings.port)
    uvicorn.run(
        "leaderboard.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

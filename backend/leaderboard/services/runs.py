"""Persistence operations for game runs.

Classes:
    RunService: Inserts runs, renames them by ``run_id`` and reads the leaderboard.

Constants:
    LEADERBOARD_SIZE: Number of runs returned by the leaderboard query.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from sqlalchemy import select, update

from leaderboard.models import Run, utcnow
from leaderboard.schemas import RunCreateRequest

_LOGGER = logging.getLogger(__name__)

LEADERBOARD_SIZE = 10


class RunService:
    """Stateless facade over the ``runs`` table.

    ``clock`` supplies ``created_at`` for new rows; tests pass a fake one to get
    deterministic tie-breaks.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or utcnow

    async def create_run(self, session, payload: RunCreateRequest) -> Run:
        # No existence check: duplicate run_ids are stored as separate rows.
        run = Run(
            run_id=payload.run_id,
            display_name=payload.display_name,
            score=payload.score,
            enemies_killed=payload.enemies_killed,
            time_survived=payload.time_survived,
            created_at=self._clock(),
        )
        session.add(run)
        await session.commit()
        await session.refresh(run)
        _LOGGER.info("Stored run %s (score=%s)", run.run_id, run.score)
        return run

    async def update_display_name(
        self,
        session,
        *,
        run_id: str,
        display_name: str,
    ) -> int:
        """Rename the earliest stored run with ``run_id``; return the match count (0 or 1)."""

        first_match = (
            select(Run.id)
            .where(Run.run_id == run_id)
            .order_by(Run.id.asc())
            .limit(1)
            .scalar_subquery()
        )
        stmt = (
            update(Run)
            .where(Run.id == first_match)
            .values(display_name=display_name)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        await session.commit()

        matched = result.rowcount
        _LOGGER.debug("Display name update for run %s matched %d row(s)", run_id, matched)
        return matched

    async def leaderboard(self, session, limit: int = LEADERBOARD_SIZE) -> list[Run]:
        stmt = (
            select(Run)
            .order_by(Run.score.desc(), Run.created_at.asc(), Run.id.asc())
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        results = await session.exec(stmt)
        return list(results.scalars().all())

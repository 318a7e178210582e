from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from leaderboard.models import Run, utcnow
from leaderboard.schemas import RunCreateRequest
from leaderboard.services.runs import LEADERBOARD_SIZE, RunService


def _payload(run_id: str, score: float, name: str = "Player") -> RunCreateRequest:
    return RunCreateRequest(
        run_id=run_id,
        display_name=name,
        score=score,
        enemies_killed=3,
        time_survived=42.5,
    )


async def _count_runs(session, run_id: str | None = None) -> int:
    stmt = select(func.count()).select_from(Run)
    if run_id is not None:
        stmt = stmt.where(Run.run_id == run_id)
    result = await session.exec(stmt)
    return int(result.scalar_one())


@pytest.mark.asyncio
async def test_create_run_stamps_created_at_with_server_time(session):
    service = RunService()
    before = utcnow()
    run = await service.create_run(session, _payload("r1", 100))
    after = utcnow()

    assert run.id is not None
    assert run.run_id == "r1"
    assert before <= run.created_at <= after
    assert await _count_runs(session) == 1


@pytest.mark.asyncio
async def test_create_run_does_not_deduplicate_run_ids(session, clock):
    service = RunService(clock=clock)
    first = await service.create_run(session, _payload("dup", 10, name="First"))
    second = await service.create_run(session, _payload("dup", 20, name="Second"))

    assert first.id != second.id
    assert await _count_runs(session, "dup") == 2


@pytest.mark.asyncio
async def test_update_display_name_reports_match_count(session, clock):
    service = RunService(clock=clock)
    await service.create_run(session, _payload("abc", 50, name="Old"))

    assert await service.update_display_name(session, run_id="abc", display_name="New") == 1
    assert await service.update_display_name(session, run_id="missing", display_name="New") == 0

    result = await session.exec(select(Run).where(Run.run_id == "abc"))
    run = result.scalars().one()
    await session.refresh(run)
    assert run.display_name == "New"
    assert run.score == 50
    assert run.enemies_killed == 3
    assert run.time_survived == 42.5


@pytest.mark.asyncio
async def test_update_display_name_is_idempotent(session, clock):
    service = RunService(clock=clock)
    await service.create_run(session, _payload("abc", 50, name="Old"))

    assert await service.update_display_name(session, run_id="abc", display_name="Same") == 1
    assert await service.update_display_name(session, run_id="abc", display_name="Same") == 1

    board = await service.leaderboard(session)
    assert [run.display_name for run in board] == ["Same"]


@pytest.mark.asyncio
async def test_update_display_name_touches_only_earliest_duplicate(session, clock):
    service = RunService(clock=clock)
    first = await service.create_run(session, _payload("dup", 10, name="First"))
    second = await service.create_run(session, _payload("dup", 20, name="Second"))

    matched = await service.update_display_name(session, run_id="dup", display_name="Renamed")
    assert matched == 1

    await session.refresh(first)
    await session.refresh(second)
    assert first.display_name == "Renamed"
    assert second.display_name == "Second"


@pytest.mark.asyncio
async def test_leaderboard_orders_by_score_then_created_at(session, clock):
    service = RunService(clock=clock)
    await service.create_run(session, _payload("low", 10))
    await service.create_run(session, _payload("tie-early", 50))
    await service.create_run(session, _payload("high", 90))
    await service.create_run(session, _payload("tie-late", 50))

    board = await service.leaderboard(session)
    assert [run.run_id for run in board] == ["high", "tie-early", "tie-late", "low"]


@pytest.mark.asyncio
async def test_leaderboard_tie_break_uses_created_at_not_insert_order(session):
    base = datetime(2024, 6, 1, tzinfo=timezone.utc)
    session.add(Run(run_id="newer", display_name="B", score=70, enemies_killed=1, time_survived=1, created_at=base + timedelta(minutes=5)))
    session.add(Run(run_id="older", display_name="A", score=70, enemies_killed=1, time_survived=1, created_at=base))
    await session.commit()

    board = await RunService().leaderboard(session)
    assert [run.run_id for run in board] == ["older", "newer"]


@pytest.mark.asyncio
async def test_leaderboard_is_capped(session, clock):
    service = RunService(clock=clock)
    for index in range(LEADERBOARD_SIZE + 5):
        await service.create_run(session, _payload(f"run-{index}", index))

    board = await service.leaderboard(session)
    assert len(board) == LEADERBOARD_SIZE
    assert [run.score for run in board] == [float(score) for score in range(14, 4, -1)]


@pytest.mark.asyncio
async def test_leaderboard_empty_store(session):
    assert await RunService().leaderboard(session) == []


@pytest.mark.asyncio
async def test_created_at_reads_back_as_aware_utc(session, clock):
    stamped = clock.current
    run = await RunService(clock=clock).create_run(session, _payload("tz", 1))

    session.expunge(run)
    result = await session.exec(select(Run).where(Run.run_id == "tz"))
    stored = result.scalars().one()
    assert stored.created_at.utcoffset() == timedelta(0)
    assert stored.created_at == stamped


@pytest.mark.asyncio
async def test_naive_created_at_is_treated_as_utc(session):
    session.add(Run(run_id="naive", display_name="N", score=1, enemies_killed=0, time_survived=1, created_at=datetime(2024, 6, 1, 8, 30)))
    await session.commit()

    board = await RunService().leaderboard(session)
    assert board[0].created_at == datetime(2024, 6, 1, 8, 30, tzinfo=timezone.utc)

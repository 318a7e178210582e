"""Database engine and session utilities.

The store handle is owned by the application: ``open_store`` is awaited once by
the lifespan hook, the resulting ``Store`` lives on ``app.state.store`` and
request handlers reach it through the ``get_session`` dependency.

Classes:
    Store: Engine plus session factory for one database.

Functions:
    create_engine(database_url): Build an AsyncEngine with SQLite-friendly connect args.
    open_store(database_url): Connect, create tables and return a ready Store.
    get_session(request): Dependency that yields an AsyncSession for request handlers.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import leaderboard.models  # noqa: F401  registers table metadata


@dataclass(slots=True)
class Store:
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]

    async def close(self) -> None:
        await self.engine.dispose()


def redact_url(database_url: str) -> str:
    return make_url(database_url).render_as_string(hide_password=True)


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(
        database_url,
        echo=False,
        future=True,
        connect_args=(
            {"check_same_thread": False}
            if database_url.startswith("sqlite")
            else {}
        ),
    )


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def open_store(database_url: str) -> Store:
    engine = create_engine(database_url)
    try:
        await init_db(engine)
    except Exception:
        await engine.dispose()
        raise
    return Store(
        engine=engine,
        session_factory=async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False),
    )


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    store: Store = request.app.state.store
    async with store.session_factory() as session:
        yield session

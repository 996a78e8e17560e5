from __future__ import annotations

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.exceptions import StoreUnavailable
from app.db.models.search import Search
from app.schemas.history import HistoryEntry


logger = structlog.get_logger()


class HistoryStore:
    """Append-only log of successful lookups backed by the ``searches`` table."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def append(self, *, city: str, temperature: int) -> HistoryEntry:
        # The timestamp is always assigned here, never taken from the caller.
        try:
            async with self._session_maker() as session:
                async with session.begin():
                    search = Search(city=city, temperature=temperature)
                    session.add(search)
                return HistoryEntry.model_validate(search)
        except SQLAlchemyError as exc:
            logger.error("history_append_failed", city=city, exc_info=exc)
            raise StoreUnavailable() from exc

    async def recent(self, limit: int = 10) -> list[HistoryEntry]:
        stmt = (
            select(Search)
            .order_by(Search.timestamp.desc(), Search.id.desc())
            .limit(limit)
        )
        try:
            async with self._session_maker() as session:
                result = await session.execute(stmt)
                return [HistoryEntry.model_validate(row) for row in result.scalars().all()]
        except SQLAlchemyError as exc:
            logger.error("history_read_failed", limit=limit, exc_info=exc)
            raise StoreUnavailable() from exc

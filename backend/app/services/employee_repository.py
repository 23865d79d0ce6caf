"""Relational persistence gateway for employee records."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy import delete, select, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import Settings
from app.models.employee_record import Base, EmployeeRecord

logger = logging.getLogger(__name__)


class EmployeeRepositoryError(RuntimeError):
    pass


class EmployeeRepository:
    def __init__(self) -> None:
        self.engine: AsyncEngine | None = None
        self.session_factory: async_sessionmaker[AsyncSession] | None = None
        self.initialized: bool = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.DATABASE_URL:
            logger.warning("DATABASE_URL missing, EmployeeRepository not initialized")
            return

        self.engine = create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)

        if settings.DATABASE_CREATE_TABLES:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

        self.initialized = True
        logger.info("EmployeeRepository initialized (url=%s)", self.engine.url.render_as_string(hide_password=True))

    async def close(self) -> None:
        if self.engine:
            await self.engine.dispose()
        self.engine = None
        self.session_factory = None
        self.initialized = False

    def _session(self) -> AsyncSession:
        if self.session_factory is None:
            raise EmployeeRepositoryError("EmployeeRepository not initialized")
        return self.session_factory()

    async def find_all(self) -> list[EmployeeRecord]:
        async with self._session() as session:
            result = await session.scalars(select(EmployeeRecord).order_by(EmployeeRecord.id))
            return list(result.all())

    async def find_by_id(self, employee_id: int) -> EmployeeRecord | None:
        async with self._session() as session:
            return await session.get(EmployeeRecord, employee_id)

    async def save(self, record: EmployeeRecord) -> EmployeeRecord:
        async with self._session() as session:
            persisted = await self._persist(session, record)
            await session.commit()
            return persisted

    async def save_all(self, records: Iterable[EmployeeRecord]) -> list[EmployeeRecord]:
        async with self._session() as session:
            persisted = [await self._persist(session, record) for record in records]
            await session.commit()
            return persisted

    async def delete(self, record: EmployeeRecord) -> None:
        async with self._session() as session:
            await session.execute(delete(EmployeeRecord).where(EmployeeRecord.id == record.id))
            await session.commit()

    async def search_by_name(self, fragment: str) -> list[EmployeeRecord]:
        # SQLite lower() folds ASCII only, so names are compared after casefold().
        needle = fragment.casefold()
        return [
            record
            for record in await self.find_all()
            if needle in f"{record.first_name or ''} {record.last_name_father or ''}".casefold()
        ]

    async def check_connection(self) -> bool:
        if not self.engine:
            return False
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception:
            logger.exception("Database connection check failed")
            return False

    @staticmethod
    async def _persist(session: AsyncSession, record: EmployeeRecord) -> EmployeeRecord:
        # Records without an id are new rows; the rest replace the stored row.
        if record.id is None:
            session.add(record)
            return record
        return await session.merge(record)


employee_repository = EmployeeRepository()

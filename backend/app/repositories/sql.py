"""SleepRepository over an AsyncSession (PostgreSQL in production)."""

import logging
from datetime import date, datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings as app_settings
from app.models.sleep_settings import SleepSettings
from app.models.time_entry import TimeEntry
from app.repositories.base import SleepRepository

logger = logging.getLogger(__name__)


class SqlSleepRepository(SleepRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_entries(self, day: date | None = None) -> list[TimeEntry]:
        if day is not None:
            q = (
                select(TimeEntry)
                .where(TimeEntry.date == day)
                .order_by(TimeEntry.time.asc(), TimeEntry.id.asc())
            )
        else:
            q = select(TimeEntry).order_by(TimeEntry.date.desc(), TimeEntry.time.asc(), TimeEntry.id.asc())
        r = await self.session.execute(q)
        return list(r.scalars().all())

    async def list_entries_between(self, start: date, end: date) -> list[TimeEntry]:
        r = await self.session.execute(
            select(TimeEntry)
            .where(TimeEntry.date >= start, TimeEntry.date <= end)
            .order_by(TimeEntry.date.asc(), TimeEntry.time.asc(), TimeEntry.id.asc())
        )
        return list(r.scalars().all())

    async def last_entry(self, day: date) -> TimeEntry | None:
        r = await self.session.execute(
            select(TimeEntry)
            .where(TimeEntry.date == day)
            .order_by(TimeEntry.time.desc(), TimeEntry.id.desc())
            .limit(1)
        )
        return r.scalar_one_or_none()

    async def insert_entry(self, type_: str, time: str, day: date) -> TimeEntry:
        entry = TimeEntry(type=type_, time=time, date=day, created_at=datetime.now(timezone.utc))
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def delete_entry(self, entry_id: int) -> bool:
        r = await self.session.execute(delete(TimeEntry).where(TimeEntry.id == entry_id))
        return (r.rowcount or 0) > 0

    async def delete_entries_for_date(self, day: date | None = None) -> int:
        stmt = delete(TimeEntry)
        if day is not None:
            stmt = stmt.where(TimeEntry.date == day)
        r = await self.session.execute(stmt)
        return r.rowcount or 0

    async def list_distinct_dates(self) -> list[date]:
        r = await self.session.execute(
            select(TimeEntry.date).group_by(TimeEntry.date).order_by(TimeEntry.date.desc())
        )
        return [row[0] for row in r.all()]

    async def commit(self) -> None:
        await self.session.commit()

    async def get_settings(self) -> SleepSettings | None:
        r = await self.session.execute(select(SleepSettings).order_by(SleepSettings.id.asc()).limit(1))
        return r.scalar_one_or_none()

    async def upsert_settings(self, **fields) -> SleepSettings:
        row = await self.get_settings()
        now = datetime.now(timezone.utc)
        if row is None:
            fields.setdefault("required_sleep_minutes", app_settings.default_required_sleep_minutes)
            row = SleepSettings(created_at=now, updated_at=now, **fields)
            self.session.add(row)
            logger.info("Sleep settings created: %s", fields)
        else:
            for key, value in fields.items():
                setattr(row, key, value)
            row.updated_at = now
            logger.info("Sleep settings updated: %s", fields)
        await self.session.flush()
        await self.session.refresh(row)
        return row

"""Tests for the repository implementations."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.models.sleep_settings import SleepSettings
from app.models.time_entry import TimeEntry
from app.repositories.memory import InMemorySleepRepository
from app.repositories.sql import SqlSleepRepository


@pytest.mark.asyncio
async def test_memory_buckets_stay_time_sorted(repo):
    day = date(2024, 1, 1)
    await repo.insert_entry("fell-asleep", "20:00", day)
    await repo.insert_entry("woke-up", "07:00", day)
    await repo.insert_entry("fell-asleep", "12:00", day)
    assert [e.time for e in await repo.list_entries(day)] == ["07:00", "12:00", "20:00"]
    assert (await repo.last_entry(day)).time == "20:00"


@pytest.mark.asyncio
async def test_memory_equal_times_keep_insertion_order(repo):
    day = date(2024, 1, 1)
    first = await repo.insert_entry("woke-up", "07:00", day)
    second = await repo.insert_entry("fell-asleep", "07:00", day)
    assert [e.id for e in await repo.list_entries(day)] == [first.id, second.id]
    assert (await repo.last_entry(day)).id == second.id


@pytest.mark.asyncio
async def test_memory_list_all_is_date_desc_time_asc(repo):
    await repo.insert_entry("woke-up", "07:00", date(2024, 1, 1))
    await repo.insert_entry("fell-asleep", "09:00", date(2024, 1, 2))
    await repo.insert_entry("woke-up", "08:00", date(2024, 1, 2))
    rows = await repo.list_entries()
    assert [(e.date.day, e.time) for e in rows] == [(2, "08:00"), (2, "09:00"), (1, "07:00")]
    assert await repo.list_distinct_dates() == [date(2024, 1, 2), date(2024, 1, 1)]


@pytest.mark.asyncio
async def test_memory_between_is_inclusive(repo):
    for d in (1, 2, 3):
        await repo.insert_entry("woke-up", "07:00", date(2024, 1, d))
    rows = await repo.list_entries_between(date(2024, 1, 2), date(2024, 1, 3))
    assert [e.date.day for e in rows] == [2, 3]


@pytest.mark.asyncio
async def test_memory_delete(repo):
    e = await repo.insert_entry("woke-up", "07:00", date(2024, 1, 1))
    assert await repo.delete_entry(e.id) is True
    assert await repo.delete_entry(e.id) is False
    assert await repo.list_distinct_dates() == []
    assert await repo.last_entry(date(2024, 1, 1)) is None


@pytest.mark.asyncio
async def test_memory_settings_singleton():
    repo = InMemorySleepRepository()
    assert await repo.get_settings() is None
    created = await repo.upsert_settings(scheduled_bedtime="19:30")
    assert created.required_sleep_minutes == 720
    updated = await repo.upsert_settings(required_sleep_minutes=-7, scheduled_bedtime=None)
    assert updated.id == created.id
    assert updated.required_sleep_minutes == -7
    assert updated.scheduled_bedtime is None


def _session_returning(result):
    session = AsyncMock()
    session.add = MagicMock()
    session.execute = AsyncMock(return_value=result)
    return session


@pytest.mark.asyncio
async def test_sql_list_entries_returns_scalars():
    row = TimeEntry(id=1, type="woke-up", time="07:00", date=date(2024, 1, 1))
    result = MagicMock()
    result.scalars.return_value.all.return_value = [row]
    repo = SqlSleepRepository(_session_returning(result))
    assert await repo.list_entries(date(2024, 1, 1)) == [row]


@pytest.mark.asyncio
async def test_sql_distinct_dates():
    result = MagicMock(all=MagicMock(return_value=[(date(2024, 1, 2),), (date(2024, 1, 1),)]))
    repo = SqlSleepRepository(_session_returning(result))
    assert await repo.list_distinct_dates() == [date(2024, 1, 2), date(2024, 1, 1)]


@pytest.mark.asyncio
async def test_sql_delete_reports_missing_row():
    repo = SqlSleepRepository(_session_returning(MagicMock(rowcount=0)))
    assert await repo.delete_entry(42) is False


@pytest.mark.asyncio
async def test_sql_insert_flushes_new_row():
    session = _session_returning(MagicMock())
    repo = SqlSleepRepository(session)
    entry = await repo.insert_entry("woke-up", "07:00", date(2024, 1, 1))
    session.add.assert_called_once_with(entry)
    session.flush.assert_awaited_once()
    assert entry.time == "07:00"
    assert entry.date == date(2024, 1, 1)


@pytest.mark.asyncio
async def test_sql_upsert_settings_creates_then_updates():
    empty = MagicMock()
    empty.scalar_one_or_none.return_value = None
    session = _session_returning(empty)
    repo = SqlSleepRepository(session)
    created = await repo.upsert_settings(scheduled_nap_time="13:00")
    assert isinstance(created, SleepSettings)
    assert created.required_sleep_minutes == 720
    session.add.assert_called_once_with(created)

    existing = MagicMock()
    existing.scalar_one_or_none.return_value = created
    session.execute = AsyncMock(return_value=existing)
    updated = await repo.upsert_settings(required_sleep_minutes=600)
    assert updated is created
    assert updated.required_sleep_minutes == 600
    assert updated.scheduled_nap_time == "13:00"


@pytest.mark.asyncio
async def test_sql_commit_commits_session():
    session = _session_returning(MagicMock())
    await SqlSleepRepository(session).commit()
    session.commit.assert_awaited_once()

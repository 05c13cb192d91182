"""In-process SleepRepository used by tests and local runs without a database.

Entries are held in one bucket per date, each bucket kept sorted by (time, id),
so "last entry of a date" and the monthly lookahead never scan other dates.
"""

from bisect import insort
from datetime import date, datetime, timezone

from app.config import settings as app_settings
from app.models.sleep_settings import SleepSettings
from app.models.time_entry import TimeEntry
from app.repositories.base import SleepRepository


def _sort_key(entry: TimeEntry) -> tuple[str, int]:
    return entry.time, entry.id


class InMemorySleepRepository(SleepRepository):
    def __init__(self):
        self._by_date: dict[date, list[TimeEntry]] = {}
        self._next_id = 1
        self._settings: SleepSettings | None = None

    async def list_entries(self, day: date | None = None) -> list[TimeEntry]:
        if day is not None:
            return list(self._by_date.get(day, []))
        out: list[TimeEntry] = []
        for d in sorted(self._by_date, reverse=True):
            out.extend(self._by_date[d])
        return out

    async def list_entries_between(self, start: date, end: date) -> list[TimeEntry]:
        out: list[TimeEntry] = []
        for d in sorted(self._by_date):
            if start <= d <= end:
                out.extend(self._by_date[d])
        return out

    async def last_entry(self, day: date) -> TimeEntry | None:
        bucket = self._by_date.get(day)
        return bucket[-1] if bucket else None

    async def insert_entry(self, type_: str, time: str, day: date) -> TimeEntry:
        entry = TimeEntry(
            id=self._next_id,
            type=type_,
            time=time,
            date=day,
            created_at=datetime.now(timezone.utc),
        )
        self._next_id += 1
        insort(self._by_date.setdefault(day, []), entry, key=_sort_key)
        return entry

    async def delete_entry(self, entry_id: int) -> bool:
        for day, bucket in self._by_date.items():
            for i, entry in enumerate(bucket):
                if entry.id == entry_id:
                    del bucket[i]
                    if not bucket:
                        del self._by_date[day]
                    return True
        return False

    async def delete_entries_for_date(self, day: date | None = None) -> int:
        if day is None:
            removed = sum(len(b) for b in self._by_date.values())
            self._by_date.clear()
            return removed
        return len(self._by_date.pop(day, []))

    async def list_distinct_dates(self) -> list[date]:
        return sorted(self._by_date, reverse=True)

    async def commit(self) -> None:
        # Writes are visible immediately
        return None

    async def get_settings(self) -> SleepSettings | None:
        return self._settings

    async def upsert_settings(self, **fields) -> SleepSettings:
        now = datetime.now(timezone.utc)
        if self._settings is None:
            self._settings = SleepSettings(
                id=1,
                required_sleep_minutes=fields.pop(
                    "required_sleep_minutes", app_settings.default_required_sleep_minutes
                ),
                scheduled_nap_time=fields.pop("scheduled_nap_time", None),
                scheduled_bedtime=fields.pop("scheduled_bedtime", None),
                created_at=now,
                updated_at=now,
            )
        else:
            self._settings.updated_at = now
        for key, value in fields.items():
            setattr(self._settings, key, value)
        return self._settings

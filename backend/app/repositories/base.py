"""Storage contract consumed by the entry and metrics services."""

from abc import ABC, abstractmethod
from datetime import date

from app.models.sleep_settings import SleepSettings
from app.models.time_entry import TimeEntry


class SleepRepository(ABC):
    @abstractmethod
    async def list_entries(self, day: date | None = None) -> list[TimeEntry]:
        """Entries for one date ascending by time; without a date, all entries by date desc then time asc."""

    @abstractmethod
    async def list_entries_between(self, start: date, end: date) -> list[TimeEntry]:
        """Entries with start <= date <= end, by date then time ascending."""

    @abstractmethod
    async def last_entry(self, day: date) -> TimeEntry | None:
        """Latest stored entry for a date (greatest time, then most recently inserted)."""

    @abstractmethod
    async def insert_entry(self, type_: str, time: str, day: date) -> TimeEntry: ...

    @abstractmethod
    async def delete_entry(self, entry_id: int) -> bool:
        """Delete by id. Returns False when nothing matched; callers treat that as success."""

    @abstractmethod
    async def delete_entries_for_date(self, day: date | None = None) -> int:
        """Delete one date's entries, or every entry when day is None. Returns rows removed."""

    @abstractmethod
    async def list_distinct_dates(self) -> list[date]:
        """Dates that have at least one entry, most recent first."""

    @abstractmethod
    async def commit(self) -> None:
        """Make pending writes visible to other sessions."""

    @abstractmethod
    async def get_settings(self) -> SleepSettings | None: ...

    @abstractmethod
    async def upsert_settings(self, **fields) -> SleepSettings:
        """Create the singleton settings row on first call, update the given fields afterwards."""

"""Entry creation: alternation and chronological-order checks before insert."""

import asyncio
import logging
from collections import Counter
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date

from app.core.errors import FormatError, ValidationError
from app.models.time_entry import EntryType, TimeEntry
from app.repositories.base import SleepRepository
from app.services.time_utils import normalize_time, time_to_minutes

logger = logging.getLogger(__name__)

RULE_ALTERNATION = "alternation"
RULE_ORDER = "order"

# Validation, insert and commit for one date run under that date's lock (single process only).
# A date's lock exists only while some caller holds or awaits it.
_date_locks: dict[date, asyncio.Lock] = {}
_lock_users: Counter[date] = Counter()


@asynccontextmanager
async def _date_lock(day: date) -> AsyncIterator[None]:
    lock = _date_locks.setdefault(day, asyncio.Lock())
    _lock_users[day] += 1
    try:
        async with lock:
            yield
    finally:
        _lock_users[day] -= 1
        if _lock_users[day] <= 0:
            del _lock_users[day]
            _date_locks.pop(day, None)


def parse_entry_type(value: str | EntryType) -> EntryType:
    try:
        return EntryType(value)
    except ValueError:
        allowed = ", ".join(t.value for t in EntryType)
        raise FormatError(f"Entry type must be one of: {allowed}; got {value!r}")


def validate_new_entry(last: TimeEntry | None, type_: EntryType, time: str) -> None:
    """Raise ValidationError if an entry of type_ at time may not follow last on the same date."""
    if last is None:
        return
    if last.type == type_.value:
        raise ValidationError(
            RULE_ALTERNATION,
            f"Entry type must alternate: the previous entry for this date ({last.time}) is already '{last.type}'.",
        )
    if time_to_minutes(time) < time_to_minutes(last.time):
        raise ValidationError(
            RULE_ORDER,
            f"Entries must be chronological: {time} is earlier than the previous entry at {last.time}.",
        )


async def add_entry(repo: SleepRepository, type_: str | EntryType, time: str, day: date) -> TimeEntry:
    """Validate against the date's last entry and insert. Nothing is written on rejection."""
    entry_type = parse_entry_type(type_)
    time = normalize_time(time)
    async with _date_lock(day):
        last = await repo.last_entry(day)
        try:
            validate_new_entry(last, entry_type, time)
        except ValidationError as e:
            logger.info("Rejected %s at %s on %s (%s): %s", entry_type.value, time, day, e.rule, e)
            raise
        entry = await repo.insert_entry(entry_type.value, time, day)
        # The next caller reads through its own session; it must see this row
        await repo.commit()
    logger.info("Entry %s created: %s at %s on %s", entry.id, entry.type, entry.time, day)
    return entry


async def remove_entry(repo: SleepRepository, entry_id: int) -> None:
    if await repo.delete_entry(entry_id):
        logger.info("Entry %s deleted", entry_id)
    else:
        logger.debug("Delete of missing entry %s ignored", entry_id)


async def clear_entries(repo: SleepRepository, day: date | None = None) -> int:
    removed = await repo.delete_entries_for_date(day)
    logger.info("Cleared %s entries (%s)", removed, day.isoformat() if day else "all dates")
    return removed

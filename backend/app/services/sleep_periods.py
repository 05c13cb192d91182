"""
Pure period arithmetic over one date's ordered entries.

Entries are any objects with `type` ("woke-up" | "fell-asleep") and `time` ("HH:MM"),
sorted by time ascending. Nothing here touches storage.
"""

from collections.abc import Sequence
from typing import NamedTuple

from app.models.time_entry import EntryType, TimeEntry
from app.services.time_utils import MINUTES_PER_DAY, duration_between, time_to_minutes

WOKE_UP = EntryType.WOKE_UP.value
FELL_ASLEEP = EntryType.FELL_ASLEEP.value


class DayDurations(NamedTuple):
    total_sleep_minutes: int
    total_awake_minutes: int
    night_sleep_minutes: int


def sum_periods(entries: Sequence[TimeEntry]) -> tuple[int, int]:
    """(sleep, awake) minutes from adjacent pairs: fell-asleep->woke-up is sleep, woke-up->fell-asleep is awake."""
    sleep = 0
    awake = 0
    for a, b in zip(entries, entries[1:]):
        duration = duration_between(time_to_minutes(a.time), time_to_minutes(b.time))
        if a.type == WOKE_UP and b.type == FELL_ASLEEP:
            awake += duration
        elif a.type == FELL_ASLEEP and b.type == WOKE_UP:
            sleep += duration
    return sleep, awake


def total_sleep_minutes(entries: Sequence[TimeEntry]) -> int | None:
    """Total sleep for a date, or None when there are fewer than 2 entries (no data)."""
    if len(entries) < 2:
        return None
    return sum_periods(entries)[0]


def night_sleep_minutes(entries: Sequence[TimeEntry], next_entries: Sequence[TimeEntry]) -> int:
    """
    Sleep from the date's last fell-asleep to the next date's first woke-up, always taken
    as crossing midnight. Without a next-date wake-up, falls back to the same date's
    first woke-up / last fell-asleep pair (heuristic for incompletely logged days).
    """
    last_asleep = next((e for e in reversed(entries) if e.type == FELL_ASLEEP), None)
    next_wake = next((e for e in next_entries if e.type == WOKE_UP), None)
    night = 0
    if last_asleep is not None and next_wake is not None:
        night = (MINUTES_PER_DAY - time_to_minutes(last_asleep.time)) + time_to_minutes(next_wake.time)
    if night == 0 and entries and entries[0].type == WOKE_UP and entries[-1].type == FELL_ASLEEP:
        night = duration_between(time_to_minutes(entries[-1].time), time_to_minutes(entries[0].time))
    return night


def day_durations(entries: Sequence[TimeEntry], next_entries: Sequence[TimeEntry] = ()) -> DayDurations:
    """Sleep, awake and night-sleep minutes for one date; all zero with fewer than 2 entries."""
    if len(entries) < 2:
        return DayDurations(0, 0, 0)
    sleep, awake = sum_periods(entries)
    return DayDurations(sleep, awake, night_sleep_minutes(entries, next_entries))

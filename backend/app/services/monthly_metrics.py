"""Per-day sleep totals across a month, for charting."""

import logging
from collections import defaultdict
from datetime import date

from app.models.time_entry import TimeEntry
from app.repositories.base import SleepRepository
from app.schemas.metrics import MonthlyMetricsPoint
from app.services.sleep_periods import day_durations
from app.services.time_utils import month_bounds

logger = logging.getLogger(__name__)


def group_by_date(entries: list[TimeEntry]) -> dict[date, list[TimeEntry]]:
    grouped: dict[date, list[TimeEntry]] = defaultdict(list)
    for e in entries:
        grouped[e.date].append(e)
    return dict(grouped)


def monthly_points(grouped: dict[date, list[TimeEntry]], start: date, end: date) -> list[MonthlyMetricsPoint]:
    """
    One point per populated date in [start, end). Night sleep looks ahead to the next
    populated date, which may lie past a gap or be the lookahead-only date at `end`.
    """
    days = sorted(grouped)
    points: list[MonthlyMetricsPoint] = []
    for i, d in enumerate(days):
        if not start <= d < end:
            continue
        next_entries = grouped[days[i + 1]] if i + 1 < len(days) else []
        durations = day_durations(grouped[d], next_entries)
        points.append(
            MonthlyMetricsPoint(
                day=d.isoformat(),
                total_sleep_minutes=durations.total_sleep_minutes,
                total_awake_minutes=durations.total_awake_minutes,
                night_sleep_minutes=durations.night_sleep_minutes,
            )
        )
    return points


async def calculate_monthly_metrics(repo: SleepRepository, month_start: date) -> list[MonthlyMetricsPoint]:
    """Points for the month containing month_start, ascending by date; days without entries are absent."""
    start, next_month = month_bounds(month_start)
    # One read covers the month plus the next month's first day (last day's night sleep)
    entries = await repo.list_entries_between(start, next_month)
    points = monthly_points(group_by_date(entries), start, next_month)
    logger.debug("Monthly metrics %s: %s populated days", start.strftime("%Y-%m"), len(points))
    return points

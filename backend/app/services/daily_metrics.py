"""
Sleep metrics for one calendar date: totals, night sleep, target completion and
the countdown to the next scheduled nap or bedtime.
"""

import logging
from datetime import date, datetime, timedelta

from app.repositories.base import SleepRepository
from app.schemas.metrics import NextScheduledSleep, ScheduledSleepType, SleepMetrics
from app.services.required_sleep import resolve_required_sleep
from app.services.sleep_periods import day_durations
from app.services.time_utils import (
    MINUTES_PER_DAY,
    format_duration,
    local_now,
    round_half_up,
    time_to_minutes,
)

logger = logging.getLogger(__name__)


def completion_percentage(sleep_minutes: int, required_minutes: int | None) -> int | None:
    if not required_minutes or required_minutes <= 0:
        return None
    return min(100, round_half_up(sleep_minutes * 100 / required_minutes))


def remaining_sleep(sleep_minutes: int, required_minutes: int) -> int:
    return max(0, required_minutes - sleep_minutes)


def excess_sleep(sleep_minutes: int, required_minutes: int) -> int:
    return max(0, sleep_minutes - required_minutes)


def minutes_until(target: str, now_minutes: int) -> int:
    """Minutes from now until the next occurrence of target; a time already reached today rolls to tomorrow."""
    delta = time_to_minutes(target) - now_minutes
    if delta <= 0:
        delta += MINUTES_PER_DAY
    return delta


def time_to_next_scheduled_sleep(
    nap_time: str | None,
    bedtime: str | None,
    now_minutes: int,
) -> NextScheduledSleep | None:
    """Nearest configured nap/bedtime; a tie goes to the nap."""
    candidates: list[NextScheduledSleep] = []
    if nap_time:
        candidates.append(NextScheduledSleep(minutes=minutes_until(nap_time, now_minutes), type=ScheduledSleepType.NAP))
    if bedtime:
        candidates.append(
            NextScheduledSleep(minutes=minutes_until(bedtime, now_minutes), type=ScheduledSleepType.BEDTIME)
        )
    if not candidates:
        return None
    return min(candidates, key=lambda c: c.minutes)


async def calculate_sleep_metrics(
    repo: SleepRepository,
    day: date,
    *,
    now: datetime | None = None,
) -> SleepMetrics:
    """
    Compute SleepMetrics for `day`, reading the following date's entries for night sleep.
    `now` (defaults to the configured local time) decides whether `day` is today and
    anchors the scheduled-sleep countdown.
    """
    now = now or local_now()
    entries = await repo.list_entries(day)
    sleep_settings = await repo.get_settings()
    required = await resolve_required_sleep(repo, sleep_settings, day)

    metrics = SleepMetrics(date=day.isoformat(), required_sleep_minutes=required)
    if len(entries) < 2:
        metrics.sleep_completion_percentage = 0
    else:
        next_entries = await repo.list_entries(day + timedelta(days=1))
        durations = day_durations(entries, next_entries)
        metrics.total_sleep_minutes = durations.total_sleep_minutes
        metrics.total_awake_minutes = durations.total_awake_minutes
        metrics.night_sleep_minutes = durations.night_sleep_minutes
        metrics.sleep_completion_percentage = completion_percentage(durations.total_sleep_minutes, required)

    if required and required > 0:
        metrics.remaining_sleep_minutes = remaining_sleep(metrics.total_sleep_minutes, required)
        metrics.excess_sleep_minutes = excess_sleep(metrics.total_sleep_minutes, required)

    if sleep_settings is not None and day == now.date():
        metrics.time_to_next_scheduled_sleep = time_to_next_scheduled_sleep(
            sleep_settings.scheduled_nap_time,
            sleep_settings.scheduled_bedtime,
            now.hour * 60 + now.minute,
        )

    logger.debug(
        "Metrics %s: sleep=%s awake=%s night=%s target=%s",
        metrics.date,
        format_duration(metrics.total_sleep_minutes),
        format_duration(metrics.total_awake_minutes),
        format_duration(metrics.night_sleep_minutes),
        required,
    )
    return metrics

"""Derived sleep metrics returned by the metrics API. Never persisted."""

from enum import Enum

from pydantic import BaseModel


class ScheduledSleepType(str, Enum):
    NAP = "nap"
    BEDTIME = "bedtime"


class NextScheduledSleep(BaseModel):
    minutes: int
    type: ScheduledSleepType


class SleepMetrics(BaseModel):
    """Totals for one calendar date; optional fields depend on settings and on the date being today."""

    date: str  # YYYY-MM-DD
    total_sleep_minutes: int = 0
    total_awake_minutes: int = 0
    night_sleep_minutes: int = 0
    required_sleep_minutes: int | None = None
    sleep_completion_percentage: int | None = None
    remaining_sleep_minutes: int | None = None
    excess_sleep_minutes: int | None = None
    time_to_next_scheduled_sleep: NextScheduledSleep | None = None


class MonthlyMetricsPoint(BaseModel):
    day: str  # YYYY-MM-DD
    total_sleep_minutes: int
    total_awake_minutes: int
    night_sleep_minutes: int

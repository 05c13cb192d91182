"""Daily sleep target: fixed from settings, or a rolling average of recent actual sleep."""

import logging
from datetime import date

from app.config import settings as app_settings
from app.models.sleep_settings import SleepSettings
from app.repositories.base import SleepRepository
from app.services.sleep_periods import total_sleep_minutes
from app.services.time_utils import round_half_up

logger = logging.getLogger(__name__)


async def rolling_average_sleep(repo: SleepRepository, window: int, as_of: date) -> int:
    """
    Average total sleep over the `window` most recent dates with entries, up to and
    including as_of. Dates with fewer than 2 entries are skipped in the average.
    Falls back to the configured default when nothing qualifies.
    """
    dates = [d for d in await repo.list_distinct_dates() if d <= as_of][:window]
    totals: list[int] = []
    for d in dates:
        total = total_sleep_minutes(await repo.list_entries(d))
        if total is not None:
            totals.append(total)
    if not totals:
        logger.debug("Rolling average over %s days before %s: no data, using default", window, as_of)
        return app_settings.default_required_sleep_minutes
    return round_half_up(sum(totals) / len(totals))


async def resolve_required_sleep(
    repo: SleepRepository,
    sleep_settings: SleepSettings | None,
    as_of: date,
) -> int | None:
    """Target minutes for as_of. None when no settings exist."""
    if sleep_settings is None:
        return None
    value = sleep_settings.required_sleep_minutes
    if value is not None and value < 0:
        return await rolling_average_sleep(repo, -value, as_of)
    return value

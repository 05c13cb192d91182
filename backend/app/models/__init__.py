from app.models.time_entry import EntryType, TimeEntry
from app.models.sleep_settings import SleepSettings

__all__ = [
    "EntryType",
    "TimeEntry",
    "SleepSettings",
]

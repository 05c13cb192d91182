"""Pydantic schemas for sleep settings (singleton)."""

from pydantic import BaseModel, Field, field_validator

from app.core.errors import FormatError
from app.services.time_utils import normalize_time


class SleepSettingsUpdate(BaseModel):
    """Partial update: only fields present in the body are written; null clears a scheduled time.

    required_sleep_minutes > 0 is a fixed daily target; -N means "average of the last N days with data".
    """

    required_sleep_minutes: int | None = Field(None, ge=-365, le=24 * 60)
    scheduled_nap_time: str | None = None
    scheduled_bedtime: str | None = None

    @field_validator("scheduled_nap_time", "scheduled_bedtime")
    @classmethod
    def _check_time(cls, v: str | None) -> str | None:
        if v is None or v == "":
            return None
        try:
            return normalize_time(v)
        except FormatError as e:
            raise ValueError(str(e))


class SleepSettingsResponse(BaseModel):
    id: int
    required_sleep_minutes: int
    scheduled_nap_time: str | None
    scheduled_bedtime: str | None
    created_at: str | None
    updated_at: str | None

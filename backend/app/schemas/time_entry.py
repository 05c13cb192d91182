"""Pydantic schemas for the entries API."""

from datetime import date as date_cls

from pydantic import BaseModel, field_validator

from app.core.errors import FormatError
from app.models.time_entry import EntryType
from app.services.time_utils import normalize_time


class TimeEntryCreate(BaseModel):
    """Body for logging a wake/sleep event. Date defaults to today when omitted."""

    type: EntryType
    time: str
    date: date_cls | None = None

    @field_validator("time")
    @classmethod
    def _check_time(cls, v: str) -> str:
        try:
            return normalize_time(v)
        except FormatError as e:
            raise ValueError(str(e))


class TimeEntryResponse(BaseModel):
    id: int
    type: EntryType
    time: str
    date: str
    created_at: str | None

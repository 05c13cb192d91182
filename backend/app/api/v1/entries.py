"""Entries API: log, list and delete wake/sleep events; list dates with data."""

from datetime import date as date_cls
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_repository
from app.core.errors import SleepLogError
from app.models.time_entry import TimeEntry
from app.repositories.base import SleepRepository
from app.schemas.time_entry import TimeEntryCreate, TimeEntryResponse
from app.services.entries import add_entry, clear_entries, remove_entry
from app.services.time_utils import local_now

router = APIRouter(tags=["entries"])


def _row_to_response(row: TimeEntry) -> dict:
    return {
        "id": row.id,
        "type": row.type,
        "time": row.time,
        "date": row.date.isoformat(),
        "created_at": row.created_at.isoformat() if row.created_at else None,
    }


@router.get(
    "/entries",
    response_model=list[TimeEntryResponse],
    summary="List entries",
)
async def list_entries(
    repo: Annotated[SleepRepository, Depends(get_repository)],
    date: date_cls | None = None,
) -> list[dict]:
    """Entries for one date (ascending by time), or all entries (newest date first) when no date is given."""
    rows = await repo.list_entries(date)
    return [_row_to_response(r) for r in rows]


@router.post(
    "/entries",
    response_model=TimeEntryResponse,
    status_code=201,
    summary="Create entry",
    responses={400: {"description": "Entry breaks alternation or chronological order"}},
)
async def create_entry(
    repo: Annotated[SleepRepository, Depends(get_repository)],
    body: TimeEntryCreate,
) -> dict:
    day = body.date or local_now().date()
    try:
        entry = await add_entry(repo, body.type, body.time, day)
    except SleepLogError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _row_to_response(entry)


@router.delete(
    "/entries/{entry_id}",
    status_code=204,
    summary="Delete entry",
)
async def delete_entry(
    repo: Annotated[SleepRepository, Depends(get_repository)],
    entry_id: int,
) -> None:
    """Delete one entry. Unknown ids are ignored."""
    await remove_entry(repo, entry_id)


@router.delete(
    "/entries",
    status_code=204,
    summary="Clear entries",
)
async def delete_entries(
    repo: Annotated[SleepRepository, Depends(get_repository)],
    date: date_cls | None = None,
) -> None:
    """Delete every entry of the given date, or all entries when no date is given."""
    await clear_entries(repo, date)


@router.get(
    "/dates",
    response_model=list[str],
    summary="Dates with entries",
)
async def list_dates(
    repo: Annotated[SleepRepository, Depends(get_repository)],
) -> list[str]:
    return [d.isoformat() for d in await repo.list_distinct_dates()]

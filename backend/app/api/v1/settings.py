"""Sleep settings API: daily target and scheduled nap/bedtime (singleton record)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import get_repository
from app.models.sleep_settings import SleepSettings
from app.repositories.base import SleepRepository
from app.schemas.sleep_settings import SleepSettingsResponse, SleepSettingsUpdate

router = APIRouter(prefix="/settings", tags=["settings"])


def _row_to_response(row: SleepSettings) -> dict:
    return {
        "id": row.id,
        "required_sleep_minutes": row.required_sleep_minutes,
        "scheduled_nap_time": row.scheduled_nap_time,
        "scheduled_bedtime": row.scheduled_bedtime,
        "created_at": row.created_at.isoformat() if row.created_at else None,
        "updated_at": row.updated_at.isoformat() if row.updated_at else None,
    }


@router.get(
    "/sleep",
    response_model=SleepSettingsResponse | None,
    summary="Get sleep settings",
)
async def get_sleep_settings(
    repo: Annotated[SleepRepository, Depends(get_repository)],
) -> dict | None:
    row = await repo.get_settings()
    return _row_to_response(row) if row else None


@router.post(
    "/sleep",
    response_model=SleepSettingsResponse,
    summary="Create or update sleep settings",
)
async def upsert_sleep_settings(
    repo: Annotated[SleepRepository, Depends(get_repository)],
    body: SleepSettingsUpdate,
) -> dict:
    """Write only the fields present in the body; the first call creates the record."""
    fields = body.model_dump(exclude_unset=True)
    if fields.get("required_sleep_minutes", 0) is None:
        del fields["required_sleep_minutes"]
    row = await repo.upsert_settings(**fields)
    return _row_to_response(row)

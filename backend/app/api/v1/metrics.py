"""Metrics API: daily sleep metrics and the monthly per-day series."""

from datetime import date as date_cls
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_repository
from app.core.errors import FormatError
from app.repositories.base import SleepRepository
from app.schemas.metrics import MonthlyMetricsPoint, SleepMetrics
from app.services.daily_metrics import calculate_sleep_metrics
from app.services.monthly_metrics import calculate_monthly_metrics
from app.services.time_utils import local_now, parse_month

router = APIRouter(prefix="/metrics", tags=["metrics"])


@router.get(
    "",
    response_model=SleepMetrics,
    response_model_exclude_none=True,
    summary="Daily sleep metrics",
)
async def get_metrics(
    repo: Annotated[SleepRepository, Depends(get_repository)],
    date: date_cls | None = None,
) -> SleepMetrics:
    """Metrics for a date (default today). The scheduled-sleep countdown is only present for today."""
    now = local_now()
    return await calculate_sleep_metrics(repo, date or now.date(), now=now)


@router.get(
    "/monthly",
    response_model=list[MonthlyMetricsPoint],
    summary="Monthly sleep series",
    responses={400: {"description": "Month is not YYYY-MM"}},
)
async def get_monthly_metrics(
    repo: Annotated[SleepRepository, Depends(get_repository)],
    month: str | None = None,
) -> list[MonthlyMetricsPoint]:
    """One point per date with entries in the month (default current month), ascending."""
    try:
        month_start = parse_month(month) if month else local_now().date().replace(day=1)
    except FormatError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return await calculate_monthly_metrics(repo, month_start)

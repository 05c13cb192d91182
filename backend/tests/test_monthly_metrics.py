"""Tests for the monthly per-day series."""

from datetime import date

import pytest

from app.services.monthly_metrics import calculate_monthly_metrics


@pytest.mark.asyncio
async def test_empty_month(repo):
    assert await calculate_monthly_metrics(repo, date(2024, 1, 1)) == []


@pytest.mark.asyncio
async def test_points_only_for_populated_dates_ascending(repo, seed):
    await seed(date(2024, 1, 10), ("woke-up", "07:00"), ("fell-asleep", "20:00"))
    await seed(date(2024, 1, 3), ("woke-up", "06:00"), ("fell-asleep", "12:00"), ("woke-up", "13:30"))
    await seed(date(2023, 12, 31), ("woke-up", "07:00"), ("fell-asleep", "21:00"))
    points = await calculate_monthly_metrics(repo, date(2024, 1, 1))
    assert [p.day for p in points] == ["2024-01-03", "2024-01-10"]
    jan3 = points[0]
    assert jan3.total_awake_minutes == 360
    assert jan3.total_sleep_minutes == 90


@pytest.mark.asyncio
async def test_lookahead_skips_to_next_populated_date(repo, seed):
    await seed(date(2024, 1, 10), ("woke-up", "07:00"), ("fell-asleep", "20:00"))
    # Nothing on the 11th; the 12th supplies the morning wake-up
    await seed(date(2024, 1, 12), ("woke-up", "06:30"), ("fell-asleep", "19:00"))
    points = await calculate_monthly_metrics(repo, date(2024, 1, 1))
    assert points[0].day == "2024-01-10"
    assert points[0].night_sleep_minutes == 240 + 390
    # Last populated date has no lookahead: same-day fallback 19:00 -> 06:30
    assert points[1].night_sleep_minutes == 690


@pytest.mark.asyncio
async def test_last_day_looks_into_next_month_without_emitting_it(repo, seed):
    await seed(date(2024, 1, 31), ("woke-up", "07:00"), ("fell-asleep", "23:30"))
    await seed(date(2024, 2, 1), ("woke-up", "07:00"), ("fell-asleep", "20:00"))
    await seed(date(2024, 2, 2), ("woke-up", "06:00"))
    points = await calculate_monthly_metrics(repo, date(2024, 1, 1))
    assert [p.day for p in points] == ["2024-01-31"]
    assert points[0].night_sleep_minutes == 450


@pytest.mark.asyncio
async def test_single_entry_date_yields_zero_point(repo, seed):
    await seed(date(2024, 1, 5), ("fell-asleep", "20:00"))
    await seed(date(2024, 1, 6), ("woke-up", "06:00"))
    points = await calculate_monthly_metrics(repo, date(2024, 1, 1))
    assert [p.day for p in points] == ["2024-01-05", "2024-01-06"]
    assert points[0].total_sleep_minutes == 0
    assert points[0].night_sleep_minutes == 0

"""FastAPI dependencies: request-scoped repository."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.repositories.base import SleepRepository
from app.repositories.sql import SqlSleepRepository


async def get_repository(
    session: Annotated[AsyncSession, Depends(get_db)],
) -> SleepRepository:
    return SqlSleepRepository(session)

"""One logged wake/sleep event. Rows are never updated, only inserted or deleted."""

import enum
from datetime import date, datetime

from sqlalchemy import Date, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class EntryType(str, enum.Enum):
    WOKE_UP = "woke-up"
    FELL_ASLEEP = "fell-asleep"


class TimeEntry(Base):
    __tablename__ = "time_entries"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column(String(16), nullable=False)  # woke-up | fell-asleep
    time: Mapped[str] = mapped_column(String(5), nullable=False)  # HH:MM, 24h
    date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)

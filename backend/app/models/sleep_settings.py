from datetime import datetime
from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from app.db.base import Base


class SleepSettings(Base):
    """Singleton row: at most one exists. Negative required_sleep_minutes = rolling average window."""

    __tablename__ = "sleep_settings"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    required_sleep_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=720)
    scheduled_nap_time: Mapped[str | None] = mapped_column(String(5), nullable=True)  # HH:MM
    scheduled_bedtime: Mapped[str | None] = mapped_column(String(5), nullable=True)  # HH:MM
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow
    )

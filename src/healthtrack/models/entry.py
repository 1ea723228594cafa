from datetime import date, datetime

from sqlalchemy import Float, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from healthtrack.database import Base


class Entry(Base):
    __tablename__ = "entries"
    # Not unique: several entries may be logged for the same day
    __table_args__ = (Index("ix_entries_user_date", "user_id", "date"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"))
    date: Mapped[date]

    workout: Mapped[str] = mapped_column(String(30))
    workout_minutes: Mapped[int]
    water_consumption: Mapped[float] = mapped_column(Float)  # liters
    sleep_time: Mapped[str] = mapped_column(String(5))
    wakeup_time: Mapped[str] = mapped_column(String(5))

    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

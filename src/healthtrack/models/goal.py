from datetime import date, datetime

from sqlalchemy import Float, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from healthtrack.database import Base


class Goal(Base):
    __tablename__ = "goals"
    # One goal per user per day; concurrent creates race on this constraint
    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_goals_user_date"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    date: Mapped[date]

    workout: Mapped[str] = mapped_column(String(30))
    workout_minutes: Mapped[int]
    calories_burnt: Mapped[int]
    water_consumption: Mapped[float] = mapped_column(Float)  # liters

    # Sleep, "HH:MM"
    sleep_time: Mapped[str] = mapped_column(String(5))
    wakeup_time: Mapped[str] = mapped_column(String(5))

    # Vitals
    systolic: Mapped[int]
    diastolic: Mapped[int]
    heart_rate: Mapped[int]

    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def blood_pressure(self) -> dict[str, int]:
        return {"systolic": self.systolic, "diastolic": self.diastolic}

from healthtrack.schemas.base import MessageResponse
from healthtrack.schemas.entry import (
    Comparison,
    EntryCreate,
    EntryRead,
    EntryResponse,
    EntryUpdate,
    MetricComparison,
    TodayComparison,
    Totals,
    WeeklyAverages,
    WeeklyStatItem,
    WeeklyStats,
)
from healthtrack.schemas.goal import (
    BloodPressure,
    BloodPressureUpdate,
    GoalCreate,
    GoalRead,
    GoalResponse,
    GoalUpdate,
)
from healthtrack.schemas.system import StatusResponse
from healthtrack.schemas.user import TokenResponse, UserLogin, UserRead, UserRegister

__all__ = [
    "BloodPressure",
    "BloodPressureUpdate",
    "Comparison",
    "EntryCreate",
    "EntryRead",
    "EntryResponse",
    "EntryUpdate",
    "GoalCreate",
    "GoalRead",
    "GoalResponse",
    "GoalUpdate",
    "MessageResponse",
    "MetricComparison",
    "StatusResponse",
    "TodayComparison",
    "TokenResponse",
    "Totals",
    "UserLogin",
    "UserRead",
    "UserRegister",
    "WeeklyAverages",
    "WeeklyStatItem",
    "WeeklyStats",
]

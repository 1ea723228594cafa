from healthtrack.models.entry import Entry
from healthtrack.models.goal import Goal
from healthtrack.models.user import User

__all__ = [
    "Entry",
    "Goal",
    "User",
]

"""Goal endpoints: one goal per user per day."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from healthtrack.api.deps import get_current_user
from healthtrack.database import get_db
from healthtrack.models.goal import Goal
from healthtrack.models.user import User
from healthtrack.schemas.base import MAX_ID, MessageResponse
from healthtrack.schemas.goal import GoalCreate, GoalRead, GoalResponse, GoalUpdate
from healthtrack.tracking import goals

router = APIRouter(prefix="/api/goals", tags=["goals"])


@router.get("", response_model=list[GoalRead])
async def list_goals(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> list[Goal]:
    """List all goals, most recent date first."""
    return await goals.list_goals(session, user.id)


@router.get("/{goal_date}", response_model=GoalRead)
async def get_goal_by_date(
    goal_date: date,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> Goal:
    return await goals.get_goal_by_date(session, user.id, goal_date)


@router.post("", response_model=GoalResponse, status_code=201)
async def create_goal(
    body: GoalCreate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> GoalResponse:
    """Set the goal for a day. A second goal for the same day is rejected."""
    goal = await goals.create_goal(session, user.id, body)
    return GoalResponse(message="Goal created successfully", goal=GoalRead.model_validate(goal))


@router.put("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: Annotated[int, Path(ge=1, le=MAX_ID)],
    body: GoalUpdate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> GoalResponse:
    """Update a goal (partial update)."""
    goal = await goals.update_goal(session, user.id, goal_id, body)
    return GoalResponse(message="Goal updated successfully", goal=GoalRead.model_validate(goal))


@router.delete("/{goal_id}", response_model=MessageResponse)
async def delete_goal(
    goal_id: Annotated[int, Path(ge=1, le=MAX_ID)],
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    await goals.delete_goal(session, user.id, goal_id)
    return MessageResponse(message="Goal deleted successfully")

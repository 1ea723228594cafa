"""Entry endpoints: activity logging plus today's comparison and weekly stats."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from healthtrack.api.deps import get_current_user
from healthtrack.database import get_db
from healthtrack.models.entry import Entry
from healthtrack.models.user import User
from healthtrack.schemas.base import MAX_ID, MessageResponse
from healthtrack.schemas.entry import (
    EntryCreate,
    EntryRead,
    EntryResponse,
    EntryUpdate,
    TodayComparison,
    WeeklyStats,
)
from healthtrack.tracking import entries

router = APIRouter(prefix="/api/entries", tags=["entries"])


@router.get("", response_model=list[EntryRead])
async def list_entries(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> list[Entry]:
    """List all entries, most recent date first."""
    return await entries.list_entries(session, user.id)


@router.get("/today/comparison", response_model=TodayComparison)
async def get_today_comparison(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> TodayComparison:
    """Today's entries, their totals, and how they compare with today's goal."""
    return await entries.get_today_comparison(session, user.id)


@router.get("/stats/weekly", response_model=WeeklyStats)
async def get_weekly_stats(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> WeeklyStats:
    """Entries from the last seven days with their averages."""
    return await entries.get_weekly_stats(session, user.id)


@router.get("/{entry_date}", response_model=EntryRead)
async def get_entry_by_date(
    entry_date: date,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> Entry:
    return await entries.get_entry_by_date(session, user.id, entry_date)


@router.post("", response_model=EntryResponse, status_code=201)
async def create_entry(
    body: EntryCreate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> EntryResponse:
    """Log an activity. Any number of entries may share a date."""
    entry = await entries.create_entry(session, user.id, body)
    return EntryResponse(message="Entry created successfully", entry=EntryRead.model_validate(entry))


@router.put("/{entry_id}", response_model=EntryResponse)
async def update_entry(
    entry_id: Annotated[int, Path(ge=1, le=MAX_ID)],
    body: EntryUpdate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> EntryResponse:
    entry = await entries.update_entry(session, user.id, entry_id, body)
    return EntryResponse(message="Entry updated successfully", entry=EntryRead.model_validate(entry))


@router.delete("/{entry_id}", response_model=MessageResponse)
async def delete_entry(
    entry_id: Annotated[int, Path(ge=1, le=MAX_ID)],
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> MessageResponse:
    await entries.delete_entry(session, user.id, entry_id)
    return MessageResponse(message="Entry deleted successfully")

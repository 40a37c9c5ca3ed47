"""Diary entries for the signed-in parent's profile."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from app.api.dependencies import DbDep, ProfileDep
from app.models.diary import DiaryEntry, DiaryEntryCreate, DiaryEntryUpdate
from app.services import diary_service

router = APIRouter(prefix="/diary", tags=["diary"])


@router.post("", response_model=DiaryEntry, status_code=status.HTTP_201_CREATED)
async def create_entry(payload: DiaryEntryCreate, profile: ProfileDep, db: DbDep) -> DiaryEntry:
    """Write a diary entry (entry_date defaults to today)."""
    return await diary_service.create_entry(db, profile, payload)


@router.get("", response_model=list[DiaryEntry])
async def list_entries(
    profile: ProfileDep,
    db: DbDep,
    limit: Optional[int] = Query(None, ge=1, le=500, description="Only the N most recent entries"),
) -> list[DiaryEntry]:
    """Return diary entries, most recent entry date first."""
    return await diary_service.list_entries(db, profile, limit=limit)


@router.get("/{entry_id}", response_model=DiaryEntry)
async def get_entry(entry_id: UUID, profile: ProfileDep, db: DbDep) -> DiaryEntry:
    entry = await diary_service.get_entry(db, profile, entry_id)
    if not entry:
        raise HTTPException(status_code=404, detail=f"Diary entry {entry_id} not found")
    return entry


@router.patch("/{entry_id}", response_model=DiaryEntry)
async def update_entry(
    entry_id: UUID, payload: DiaryEntryUpdate, profile: ProfileDep, db: DbDep
) -> DiaryEntry:
    """Update a diary entry (all fields optional)."""
    entry = await diary_service.update_entry(db, profile, entry_id, payload)
    if not entry:
        raise HTTPException(status_code=404, detail=f"Diary entry {entry_id} not found")
    return entry


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(entry_id: UUID, profile: ProfileDep, db: DbDep) -> None:
    """Delete a diary entry. There is no undo."""
    deleted = await diary_service.delete_entry(db, profile, entry_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Diary entry {entry_id} not found")

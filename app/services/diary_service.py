"""Async CRUD for diary entries, always scoped to one profile."""

from typing import Optional
from uuid import UUID

import asyncpg

from app.models.diary import DiaryEntry, DiaryEntryCreate, DiaryEntryUpdate
from app.models.profile import Profile
from app.services.errors import ProfileRequiredError

_REQUIRED_COLUMNS = {"title", "description", "emotion", "entry_date"}


def _row_to_entry(row: asyncpg.Record) -> DiaryEntry:
    return DiaryEntry(
        id=row["id"],
        profile_id=row["profile_id"],
        title=row["title"],
        description=row["description"],
        photo_url=row["photo_url"],
        emotion=row["emotion"],
        entry_date=row["entry_date"],
        created_at=row["created_at"],
    )


async def create_entry(
    db: asyncpg.Connection, profile: Optional[Profile], entry: DiaryEntryCreate
) -> DiaryEntry:
    """Write a diary entry for the profile and return the stored record."""
    if profile is None:
        raise ProfileRequiredError("write a diary entry")
    row = await db.fetchrow(
        """INSERT INTO diary_entries (profile_id, title, description, photo_url, emotion, entry_date)
           VALUES ($1, $2, $3, $4, $5, $6) RETURNING *""",
        profile.id,
        entry.title,
        entry.description,
        entry.photo_url,
        entry.emotion,
        entry.entry_date,
    )
    return _row_to_entry(row)


async def list_entries(
    db: asyncpg.Connection, profile: Profile, limit: Optional[int] = None
) -> list[DiaryEntry]:
    """Return the profile's entries, most recent entry_date first."""
    rows = await db.fetch(
        """SELECT * FROM diary_entries
           WHERE profile_id = $1
           ORDER BY entry_date DESC, created_at DESC
           LIMIT $2""",
        profile.id, limit,
    )
    return [_row_to_entry(r) for r in rows]


async def get_entry(db: asyncpg.Connection, profile: Profile, entry_id: UUID) -> Optional[DiaryEntry]:
    row = await db.fetchrow(
        "SELECT * FROM diary_entries WHERE id = $1 AND profile_id = $2", entry_id, profile.id
    )
    return _row_to_entry(row) if row else None


async def update_entry(
    db: asyncpg.Connection, profile: Profile, entry_id: UUID, update: DiaryEntryUpdate
) -> Optional[DiaryEntry]:
    """Update the provided fields. Returns None if the entry isn't the profile's."""
    updates = {
        k: v for k, v in update.model_dump(exclude_unset=True).items()
        if v is not None or k not in _REQUIRED_COLUMNS
    }
    if not updates:
        return await get_entry(db, profile, entry_id)

    cols = ", ".join(f"{k} = ${i}" for i, k in enumerate(updates, start=1))
    values = list(updates.values()) + [entry_id, profile.id]
    idx = len(updates)
    row = await db.fetchrow(
        f"""UPDATE diary_entries SET {cols}
            WHERE id = ${idx + 1} AND profile_id = ${idx + 2}
            RETURNING *""",
        *values,
    )
    return _row_to_entry(row) if row else None


async def delete_entry(db: asyncpg.Connection, profile: Profile, entry_id: UUID) -> bool:
    """Delete an entry permanently. Returns True if deleted."""
    result = await db.execute(
        "DELETE FROM diary_entries WHERE id = $1 AND profile_id = $2", entry_id, profile.id
    )
    return result == "DELETE 1"

"""Async CRUD operations for parent profiles (one per account)."""

from typing import Optional
from uuid import UUID

import asyncpg

from app.models.profile import Profile, ProfileCreate, ProfileUpdate

# Columns a NULL would violate; an explicit null in an update is ignored for these
_REQUIRED_COLUMNS = {"parent_name", "child_name", "child_birthdate"}


def _row_to_profile(row: asyncpg.Record) -> Profile:
    return Profile(
        id=row["id"],
        user_id=row["user_id"],
        parent_name=row["parent_name"],
        child_name=row["child_name"],
        child_birthdate=row["child_birthdate"],
        child_gender=row["child_gender"],
        child_photo_url=row["child_photo_url"],
        main_challenge=row["main_challenge"],
        created_at=row["created_at"],
    )


async def create_profile(db: asyncpg.Connection, user_id: UUID, profile: ProfileCreate) -> Profile:
    """Insert the onboarding profile for an account and return it.

    A second profile for the same account is not rejected here; callers gate
    on has_profile() first.
    """
    row = await db.fetchrow(
        """INSERT INTO profiles
               (user_id, parent_name, child_name, child_birthdate,
                child_gender, child_photo_url, main_challenge)
           VALUES ($1, $2, $3, $4, $5, $6, $7) RETURNING *""",
        user_id,
        profile.parent_name,
        profile.child_name,
        profile.child_birthdate,
        profile.child_gender,
        profile.child_photo_url,
        profile.main_challenge,
    )
    return _row_to_profile(row)


async def get_profile(db: asyncpg.Connection, profile_id: UUID) -> Optional[Profile]:
    row = await db.fetchrow("SELECT * FROM profiles WHERE id = $1", profile_id)
    return _row_to_profile(row) if row else None


async def get_profile_for_user(db: asyncpg.Connection, user_id: UUID) -> Optional[Profile]:
    """Return the account's profile, or None before onboarding."""
    row = await db.fetchrow(
        "SELECT * FROM profiles WHERE user_id = $1 ORDER BY created_at LIMIT 1", user_id
    )
    return _row_to_profile(row) if row else None


async def has_profile(db: asyncpg.Connection, user_id: UUID) -> bool:
    return await db.fetchval(
        "SELECT EXISTS(SELECT 1 FROM profiles WHERE user_id = $1)", user_id
    )


async def list_profiles(db: asyncpg.Connection) -> list[Profile]:
    """All families, newest first (creator portal)."""
    rows = await db.fetch("SELECT * FROM profiles ORDER BY created_at DESC")
    return [_row_to_profile(r) for r in rows]


async def update_profile(
    db: asyncpg.Connection, profile_id: UUID, update: ProfileUpdate
) -> Optional[Profile]:
    """Update the provided fields and return the profile, or None if it doesn't exist."""
    updates = {
        k: v for k, v in update.model_dump(exclude_unset=True).items()
        if v is not None or k not in _REQUIRED_COLUMNS
    }
    if not updates:
        return await get_profile(db, profile_id)

    cols = ", ".join(f"{k} = ${i}" for i, k in enumerate(updates, start=1))
    values = list(updates.values()) + [profile_id]
    row = await db.fetchrow(
        f"UPDATE profiles SET {cols} WHERE id = ${len(values)} RETURNING *", *values
    )
    return _row_to_profile(row) if row else None

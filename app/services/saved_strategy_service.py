"""Saved strategies: a parent's bookmarks and whether each one worked.

Per (profile, strategy) pair the record is either absent (unsaved) or present
with a ``worked`` flag. save() always starts at worked = false; unsave()
removes the record whatever its flag.
"""

import logging
from typing import Optional
from uuid import UUID

import asyncpg

from app.models.profile import Profile
from app.models.saved_strategy import SavedStrategy
from app.services.errors import ProfileRequiredError

logger = logging.getLogger(__name__)


def _row_to_saved(row: asyncpg.Record) -> SavedStrategy:
    return SavedStrategy(
        id=row["id"],
        profile_id=row["profile_id"],
        strategy_id=row["strategy_id"],
        worked=row["worked"],
        created_at=row["created_at"],
    )


def _require(profile: Optional[Profile], action: str) -> Profile:
    if profile is None:
        raise ProfileRequiredError(action)
    return profile


async def save_strategy(
    db: asyncpg.Connection, profile: Optional[Profile], strategy_id: UUID
) -> SavedStrategy:
    """Bookmark a strategy.

    A second save of the same pair raises asyncpg.UniqueViolationError.
    """
    profile = _require(profile, "save a strategy")
    row = await db.fetchrow(
        """INSERT INTO saved_strategies (profile_id, strategy_id, worked)
           VALUES ($1, $2, FALSE) RETURNING *""",
        profile.id, strategy_id,
    )
    logger.debug("Profile %s saved strategy %s", profile.id, strategy_id)
    return _row_to_saved(row)


async def unsave_strategy(
    db: asyncpg.Connection, profile: Optional[Profile], strategy_id: UUID
) -> bool:
    """Remove a bookmark. Returns True if a record was deleted; absent is not an error."""
    profile = _require(profile, "unsave a strategy")
    result = await db.execute(
        "DELETE FROM saved_strategies WHERE profile_id = $1 AND strategy_id = $2",
        profile.id, strategy_id,
    )
    return result == "DELETE 1"


async def toggle_worked(
    db: asyncpg.Connection, profile: Optional[Profile], strategy_id: UUID
) -> Optional[SavedStrategy]:
    """Flip the worked flag in one statement. None if the strategy isn't saved."""
    profile = _require(profile, "mark a strategy as worked")
    row = await db.fetchrow(
        """UPDATE saved_strategies SET worked = NOT worked
           WHERE profile_id = $1 AND strategy_id = $2
           RETURNING *""",
        profile.id, strategy_id,
    )
    return _row_to_saved(row) if row else None


async def set_worked(
    db: asyncpg.Connection, profile: Optional[Profile], strategy_id: UUID, worked: bool
) -> Optional[SavedStrategy]:
    profile = _require(profile, "mark a strategy as worked")
    row = await db.fetchrow(
        """UPDATE saved_strategies SET worked = $3
           WHERE profile_id = $1 AND strategy_id = $2
           RETURNING *""",
        profile.id, strategy_id, worked,
    )
    return _row_to_saved(row) if row else None


async def get_saved(
    db: asyncpg.Connection, profile: Profile, strategy_id: UUID
) -> Optional[SavedStrategy]:
    row = await db.fetchrow(
        "SELECT * FROM saved_strategies WHERE profile_id = $1 AND strategy_id = $2",
        profile.id, strategy_id,
    )
    return _row_to_saved(row) if row else None


async def is_saved(db: asyncpg.Connection, profile: Profile, strategy_id: UUID) -> bool:
    return await get_saved(db, profile, strategy_id) is not None


async def list_saved(db: asyncpg.Connection, profile: Profile) -> list[SavedStrategy]:
    """The profile's bookmarks, most recently saved first."""
    rows = await db.fetch(
        "SELECT * FROM saved_strategies WHERE profile_id = $1 ORDER BY created_at DESC",
        profile.id,
    )
    return [_row_to_saved(r) for r in rows]


async def count_saved(db: asyncpg.Connection, profile: Profile) -> tuple[int, int]:
    """(saved, worked) counts for the profile page."""
    row = await db.fetchrow(
        """SELECT count(*) AS saved, count(*) FILTER (WHERE worked) AS worked
           FROM saved_strategies WHERE profile_id = $1""",
        profile.id,
    )
    return row["saved"], row["worked"]

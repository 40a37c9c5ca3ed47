"""Strategy records: creator CRUD plus the eligibility rules parents see."""

from collections.abc import Iterable
from typing import Optional
from uuid import UUID

import asyncpg

from app.models.strategy import CreatorStats, Strategy, StrategyCategory, StrategyCreate, StrategyUpdate

# Catalog fetch order. weekly_boost() picks the first match, so the newest
# boosted strategy wins when several are flagged.
CATALOG_ORDER = "ORDER BY created_at DESC, id DESC"


def _row_to_strategy(row: asyncpg.Record) -> Strategy:
    return Strategy(
        id=row["id"],
        creator_id=row["creator_id"],
        title=row["title"],
        category=row["category"],
        age_min=row["age_min"],
        age_max=row["age_max"],
        strategy_text=row["strategy_text"],
        script_text=row["script_text"],
        audio_url=row["audio_url"],
        is_weekly_boost=row["is_weekly_boost"],
        published=row["published"],
        created_at=row["created_at"],
    )


# ── Eligibility (pure) ─────────────────────────────────────────────────────


def is_eligible(strategy: Strategy, category: StrategyCategory, child_age_months: int) -> bool:
    """Published, same category, and the child's age within the inclusive bounds."""
    return (
        strategy.published
        and strategy.category == category
        and strategy.age_min <= child_age_months <= strategy.age_max
    )


def filter_eligible(
    strategies: Iterable[Strategy], category: StrategyCategory, child_age_months: int
) -> list[Strategy]:
    """Every strategy a parent may see for this category and age, in input order."""
    return [s for s in strategies if is_eligible(s, category, child_age_months)]


def weekly_boost(strategies: Iterable[Strategy]) -> Optional[Strategy]:
    """First published strategy flagged as the weekly boost, or None."""
    return next((s for s in strategies if s.is_weekly_boost and s.published), None)


def creator_stats(strategies: Iterable[Strategy]) -> CreatorStats:
    strategies = list(strategies)
    return CreatorStats(
        total=len(strategies),
        published=sum(1 for s in strategies if s.published),
        weekly_boost=sum(1 for s in strategies if s.is_weekly_boost),
    )


# ── Database ───────────────────────────────────────────────────────────────


async def fetch_all(db: asyncpg.Connection) -> list[Strategy]:
    """Every strategy, published or not, in catalog order."""
    rows = await db.fetch(f"SELECT * FROM strategies {CATALOG_ORDER}")
    return [_row_to_strategy(r) for r in rows]


async def list_by_creator(db: asyncpg.Connection, creator_id: UUID) -> list[Strategy]:
    rows = await db.fetch(
        f"SELECT * FROM strategies WHERE creator_id = $1 {CATALOG_ORDER}", creator_id
    )
    return [_row_to_strategy(r) for r in rows]


async def get_strategy(db: asyncpg.Connection, strategy_id: UUID) -> Optional[Strategy]:
    row = await db.fetchrow("SELECT * FROM strategies WHERE id = $1", strategy_id)
    return _row_to_strategy(row) if row else None


async def create_strategy(
    db: asyncpg.Connection, creator_id: UUID, strategy: StrategyCreate
) -> Strategy:
    """Insert a strategy authored by creator_id and return the full record."""
    row = await db.fetchrow(
        """INSERT INTO strategies
               (creator_id, title, category, age_min, age_max, strategy_text,
                script_text, audio_url, is_weekly_boost, published)
           VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10) RETURNING *""",
        creator_id,
        strategy.title,
        strategy.category,
        strategy.age_min,
        strategy.age_max,
        strategy.strategy_text,
        strategy.script_text,
        strategy.audio_url,
        strategy.is_weekly_boost,
        strategy.published,
    )
    return _row_to_strategy(row)


async def update_strategy(
    db: asyncpg.Connection, creator_id: UUID, strategy_id: UUID, update: StrategyUpdate
) -> Optional[Strategy]:
    """Update one of the creator's strategies. None if it isn't theirs or doesn't exist.

    Raises ValueError when the merged age bounds would be inverted.
    """
    current = await get_strategy(db, strategy_id)
    if not current or current.creator_id != creator_id:
        return None

    updates = update.model_dump(exclude_unset=True)
    nullable = {"script_text", "audio_url"}
    updates = {k: v for k, v in updates.items() if v is not None or k in nullable}
    if not updates:
        return current

    age_min = updates.get("age_min", current.age_min)
    age_max = updates.get("age_max", current.age_max)
    if age_min > age_max:
        raise ValueError("age_min must be <= age_max")

    cols = ", ".join(f"{k} = ${i}" for i, k in enumerate(updates, start=1))
    values = list(updates.values()) + [strategy_id, creator_id]
    idx = len(updates)
    row = await db.fetchrow(
        f"""UPDATE strategies SET {cols}
            WHERE id = ${idx + 1} AND creator_id = ${idx + 2}
            RETURNING *""",
        *values,
    )
    return _row_to_strategy(row) if row else None


async def delete_strategy(db: asyncpg.Connection, creator_id: UUID, strategy_id: UUID) -> bool:
    """Delete one of the creator's strategies (saved bookmarks go with it)."""
    result = await db.execute(
        "DELETE FROM strategies WHERE id = $1 AND creator_id = $2", strategy_id, creator_id
    )
    return result == "DELETE 1"

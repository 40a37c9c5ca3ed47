"""Saved-strategy lifecycle: unsaved -> saved (not worked) <-> saved (worked)."""

from datetime import date

import asyncpg
import pytest

from app.models.profile import ProfileCreate
from app.models.strategy import StrategyCreate
from app.services.errors import ProfileRequiredError
from app.services.profile_service import create_profile
from app.services.saved_strategy_service import (
    count_saved,
    get_saved,
    is_saved,
    list_saved,
    save_strategy,
    set_worked,
    toggle_worked,
    unsave_strategy,
)
from app.services.strategy_service import create_strategy
from tests.factories import CREATOR_ID, PARENT_ID

pytestmark = pytest.mark.asyncio


async def _setup(db):
    profile = await create_profile(
        db, PARENT_ID, ProfileCreate(parent_name="Sam", child_name="Maya", child_birthdate=date(2023, 4, 10))
    )
    strategy = await create_strategy(
        db, CREATOR_ID,
        StrategyCreate(title="Bedtime countdown", category="sleep", strategy_text="Warn twice.", published=True),
    )
    return profile, strategy


async def test_save_starts_not_worked(db):
    profile, strategy = await _setup(db)
    saved = await save_strategy(db, profile, strategy.id)
    assert saved.worked is False
    assert saved.profile_id == profile.id
    assert await is_saved(db, profile, strategy.id) is True


async def test_save_twice_is_an_error(db):
    profile, strategy = await _setup(db)
    await save_strategy(db, profile, strategy.id)
    with pytest.raises(asyncpg.UniqueViolationError):
        await save_strategy(db, profile, strategy.id)


async def test_save_requires_profile(db):
    _, strategy = await _setup(db)
    with pytest.raises(ProfileRequiredError):
        await save_strategy(db, None, strategy.id)


async def test_toggle_worked_twice(db):
    profile, strategy = await _setup(db)
    await save_strategy(db, profile, strategy.id)
    assert (await toggle_worked(db, profile, strategy.id)).worked is True
    assert (await toggle_worked(db, profile, strategy.id)).worked is False


async def test_toggle_worked_when_unsaved(db):
    profile, strategy = await _setup(db)
    assert await toggle_worked(db, profile, strategy.id) is None
    assert await get_saved(db, profile, strategy.id) is None


async def test_set_worked(db):
    profile, strategy = await _setup(db)
    await save_strategy(db, profile, strategy.id)
    assert (await set_worked(db, profile, strategy.id, True)).worked is True
    assert (await set_worked(db, profile, strategy.id, True)).worked is True


async def test_unsave_is_idempotent(db):
    profile, strategy = await _setup(db)
    await save_strategy(db, profile, strategy.id)
    assert await unsave_strategy(db, profile, strategy.id) is True
    assert await unsave_strategy(db, profile, strategy.id) is False


async def test_save_then_unsave_round_trip(db):
    profile, strategy = await _setup(db)
    before = await list_saved(db, profile)
    await save_strategy(db, profile, strategy.id)
    await toggle_worked(db, profile, strategy.id)
    await unsave_strategy(db, profile, strategy.id)
    assert await list_saved(db, profile) == before
    assert await count_saved(db, profile) == (0, 0)

    # Re-saving starts over at not-worked
    again = await save_strategy(db, profile, strategy.id)
    assert again.worked is False


async def test_count_saved(db):
    profile, strategy = await _setup(db)
    other = await create_strategy(
        db, CREATOR_ID, StrategyCreate(title="Veggie game", category="eating", strategy_text="Play.", published=True)
    )
    await save_strategy(db, profile, strategy.id)
    await save_strategy(db, profile, other.id)
    await toggle_worked(db, profile, other.id)
    assert await count_saved(db, profile) == (2, 1)

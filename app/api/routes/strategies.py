"""Parent-facing strategy library: eligible strategies, weekly boost, detail."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query

from app.api.dependencies import DbDep, LoadedCatalogDep, ProfileDep
from app.models.strategy import Strategy, StrategyCategory, StrategyDetail
from app.services import saved_strategy_service, strategy_service
from app.utils.age import calculate_age, format_age_range

router = APIRouter(prefix="/strategies", tags=["strategies"])


@router.get("", response_model=list[Strategy])
async def list_eligible(
    profile: ProfileDep,
    catalog: LoadedCatalogDep,
    category: StrategyCategory = Query(..., description="meltdown, sleep, eating, listening or discipline"),
) -> list[Strategy]:
    """Published strategies in the category that fit the child's current age."""
    age_months = calculate_age(profile.child_birthdate).total_months
    return catalog.filter_eligible(category, age_months)


@router.get("/weekly-boost", response_model=Optional[Strategy])
async def get_weekly_boost(profile: ProfileDep, catalog: LoadedCatalogDep) -> Optional[Strategy]:
    """This week's highlighted strategy, or null when none is flagged."""
    return catalog.weekly_boost()


@router.get("/{strategy_id}", response_model=StrategyDetail)
async def get_strategy_detail(
    strategy_id: UUID, profile: ProfileDep, catalog: LoadedCatalogDep, db: DbDep
) -> StrategyDetail:
    """A published strategy with the parent's saved / worked state."""
    strategy = catalog.get_published(strategy_id)
    if not strategy:
        raise HTTPException(status_code=404, detail=f"Strategy {strategy_id} not found")

    age_months = calculate_age(profile.child_birthdate).total_months
    saved = await saved_strategy_service.get_saved(db, profile, strategy_id)
    return StrategyDetail(
        strategy=strategy,
        age_range_label=format_age_range(strategy.age_min, strategy.age_max),
        eligible=strategy_service.is_eligible(strategy, strategy.category, age_months),
        saved=saved is not None,
        worked=bool(saved and saved.worked),
    )

"""Creator portal: authoring strategies and browsing families."""

import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from app.api.auth import CreatorAccount
from app.api.dependencies import CatalogDep, DbDep
from app.models.profile import Family
from app.models.strategy import CreatorStats, Strategy, StrategyCreate, StrategyUpdate
from app.services import profile_service, strategy_service
from app.utils.age import format_age

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/creator", tags=["creator"])


@router.get("/strategies", response_model=list[Strategy])
async def list_my_strategies(account: CreatorAccount, db: DbDep) -> list[Strategy]:
    """The creator's own strategies, newest first, published or not."""
    return await strategy_service.list_by_creator(db, account.user_id)


@router.get("/stats", response_model=CreatorStats)
async def get_stats(account: CreatorAccount, db: DbDep) -> CreatorStats:
    strategies = await strategy_service.list_by_creator(db, account.user_id)
    return strategy_service.creator_stats(strategies)


@router.post("/strategies", response_model=Strategy, status_code=status.HTTP_201_CREATED)
async def create_strategy(
    payload: StrategyCreate, account: CreatorAccount, db: DbDep, catalog: CatalogDep
) -> Strategy:
    strategy = await strategy_service.create_strategy(db, account.user_id, payload)
    catalog.invalidate()
    logger.info("Strategy %s created by %s (published=%s)", strategy.id, account.user_id, strategy.published)
    return strategy


@router.get("/strategies/{strategy_id}", response_model=Strategy)
async def get_my_strategy(strategy_id: UUID, account: CreatorAccount, db: DbDep) -> Strategy:
    strategy = await strategy_service.get_strategy(db, strategy_id)
    if not strategy or strategy.creator_id != account.user_id:
        raise HTTPException(status_code=404, detail=f"Strategy {strategy_id} not found")
    return strategy


@router.patch("/strategies/{strategy_id}", response_model=Strategy)
async def update_strategy(
    strategy_id: UUID,
    payload: StrategyUpdate,
    account: CreatorAccount,
    db: DbDep,
    catalog: CatalogDep,
) -> Strategy:
    """Edit a strategy, including publishing / unpublishing it."""
    try:
        strategy = await strategy_service.update_strategy(db, account.user_id, strategy_id, payload)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if not strategy:
        raise HTTPException(status_code=404, detail=f"Strategy {strategy_id} not found")
    catalog.invalidate()
    return strategy


@router.delete("/strategies/{strategy_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_strategy(
    strategy_id: UUID, account: CreatorAccount, db: DbDep, catalog: CatalogDep
) -> None:
    deleted = await strategy_service.delete_strategy(db, account.user_id, strategy_id)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Strategy {strategy_id} not found")
    catalog.invalidate()


@router.get("/families", response_model=list[Family])
async def list_families(account: CreatorAccount, db: DbDep) -> list[Family]:
    """Every parent profile, newest first, with the child's age."""
    profiles = await profile_service.list_profiles(db)
    return [
        Family(**p.model_dump(), child_age_label=format_age(p.child_birthdate))
        for p in profiles
    ]

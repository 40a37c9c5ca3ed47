"""Saved strategies: bookmark, remove, and record whether a strategy worked."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from app.api.dependencies import DbDep, LoadedCatalogDep, ProfileDep
from app.models.saved_strategy import SavedStrategy, WorkedUpdate
from app.services import saved_strategy_service

router = APIRouter(prefix="/saved", tags=["saved"])


@router.get("", response_model=list[SavedStrategy])
async def list_saved(profile: ProfileDep, db: DbDep) -> list[SavedStrategy]:
    return await saved_strategy_service.list_saved(db, profile)


@router.post("/{strategy_id}", response_model=SavedStrategy, status_code=status.HTTP_201_CREATED)
async def save_strategy(
    strategy_id: UUID, profile: ProfileDep, catalog: LoadedCatalogDep, db: DbDep
) -> SavedStrategy:
    """Bookmark a published strategy. Saving it twice is a conflict."""
    if not catalog.get_published(strategy_id):
        raise HTTPException(status_code=404, detail=f"Strategy {strategy_id} not found")
    return await saved_strategy_service.save_strategy(db, profile, strategy_id)


@router.delete("/{strategy_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unsave_strategy(strategy_id: UUID, profile: ProfileDep, db: DbDep) -> None:
    """Remove a bookmark. Succeeds whether or not it was saved."""
    await saved_strategy_service.unsave_strategy(db, profile, strategy_id)


@router.post("/{strategy_id}/toggle-worked", response_model=SavedStrategy)
async def toggle_worked(strategy_id: UUID, profile: ProfileDep, db: DbDep) -> SavedStrategy:
    """Flip the worked flag of a saved strategy."""
    saved = await saved_strategy_service.toggle_worked(db, profile, strategy_id)
    if not saved:
        raise HTTPException(status_code=404, detail=f"Strategy {strategy_id} is not saved")
    return saved


@router.put("/{strategy_id}/worked", response_model=SavedStrategy)
async def set_worked(
    strategy_id: UUID, payload: WorkedUpdate, profile: ProfileDep, db: DbDep
) -> SavedStrategy:
    saved = await saved_strategy_service.set_worked(db, profile, strategy_id, payload.worked)
    if not saved:
        raise HTTPException(status_code=404, detail=f"Strategy {strategy_id} is not saved")
    return saved

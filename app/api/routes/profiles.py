"""Parent profile: onboarding, lookup, edits and the profile page summary."""

import logging

from fastapi import APIRouter, HTTPException, status

from app.api.auth import ParentAccount
from app.api.dependencies import DbDep, ProfileDep
from app.models.profile import Profile, ProfileCreate, ProfileStatus, ProfileSummary, ProfileUpdate
from app.services import profile_service, saved_strategy_service
from app.utils.age import calculate_age, format_age

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("/status", response_model=ProfileStatus)
async def profile_status(account: ParentAccount, db: DbDep) -> ProfileStatus:
    """Whether the account has finished onboarding."""
    return ProfileStatus(has_profile=await profile_service.has_profile(db, account.user_id))


@router.post("", response_model=Profile, status_code=status.HTTP_201_CREATED)
async def create_profile(payload: ProfileCreate, account: ParentAccount, db: DbDep) -> Profile:
    """Onboarding: create the account's single profile."""
    if await profile_service.has_profile(db, account.user_id):
        raise HTTPException(status_code=409, detail="Profile already exists for this account")
    profile = await profile_service.create_profile(db, account.user_id, payload)
    logger.info("Profile %s created for account %s", profile.id, account.user_id)
    return profile


@router.get("", response_model=Profile)
async def get_profile(profile: ProfileDep) -> Profile:
    return profile


@router.patch("", response_model=Profile)
async def update_profile(payload: ProfileUpdate, profile: ProfileDep, db: DbDep) -> Profile:
    """Update the profile (partial fields)."""
    updated = await profile_service.update_profile(db, profile.id, payload)
    if not updated:
        raise HTTPException(status_code=404, detail=f"Profile {profile.id} not found")
    return updated


@router.get("/summary", response_model=ProfileSummary)
async def profile_summary(profile: ProfileDep, db: DbDep) -> ProfileSummary:
    """Child's age plus how many saved strategies have worked."""
    saved, worked = await saved_strategy_service.count_saved(db, profile)
    return ProfileSummary(
        profile=profile,
        child_age=calculate_age(profile.child_birthdate),
        child_age_label=format_age(profile.child_birthdate),
        saved_count=saved,
        worked_count=worked,
    )

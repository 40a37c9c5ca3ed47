"""Reusable FastAPI dependencies (DB, strategy catalog, resolved profile)."""

from collections.abc import AsyncGenerator
from typing import Annotated

import asyncpg
from fastapi import Depends, Request

from app.api.auth import ParentAccount
from app.models.profile import Profile
from app.services import profile_service
from app.services.catalog import StrategyCatalog
from app.services.database import get_db as _get_db
from app.services.errors import ProfileRequiredError


async def db_dependency() -> AsyncGenerator[asyncpg.Connection, None]:
    """Provide a PostgreSQL connection for the duration of the request."""
    async with _get_db() as conn:
        yield conn


DbDep = Annotated[asyncpg.Connection, Depends(db_dependency)]


def get_catalog(request: Request) -> StrategyCatalog:
    """Return the shared strategy catalog, creating it on first use."""
    catalog = getattr(request.app.state, "strategy_catalog", None)
    if catalog is None:
        catalog = StrategyCatalog()
        request.app.state.strategy_catalog = catalog
    return catalog


CatalogDep = Annotated[StrategyCatalog, Depends(get_catalog)]


async def get_loaded_catalog(catalog: CatalogDep, db: DbDep) -> StrategyCatalog:
    await catalog.ensure_loaded(db)
    return catalog


LoadedCatalogDep = Annotated[StrategyCatalog, Depends(get_loaded_catalog)]


async def get_current_profile(account: ParentAccount, db: DbDep) -> Profile:
    """The parent's profile. Accounts that haven't onboarded get ProfileRequiredError."""
    profile = await profile_service.get_profile_for_user(db, account.user_id)
    if profile is None:
        raise ProfileRequiredError("continue before onboarding")
    return profile


ProfileDep = Annotated[Profile, Depends(get_current_profile)]

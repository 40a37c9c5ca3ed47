"""Healthcheck endpoint."""

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    catalog_loaded: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Service status and whether the strategy catalog is warm."""
    catalog = getattr(request.app.state, "strategy_catalog", None)
    return HealthResponse(status="ok", catalog_loaded=bool(catalog and catalog.loaded))

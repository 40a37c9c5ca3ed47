from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class SavedStrategy(BaseModel):
    """A parent's bookmark of a strategy. Exists only while saved."""
    id: UUID
    profile_id: UUID
    strategy_id: UUID
    worked: bool = False
    created_at: datetime

    model_config = {"from_attributes": True}


class WorkedUpdate(BaseModel):
    worked: bool

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

StrategyCategory = Literal["meltdown", "sleep", "eating", "listening", "discipline"]

# Default eligibility window for a new strategy: birth to 12 years
DEFAULT_AGE_MIN = 0
DEFAULT_AGE_MAX = 144


class StrategyBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    category: StrategyCategory
    age_min: int = Field(DEFAULT_AGE_MIN, ge=0, description="Youngest eligible age in months (inclusive)")
    age_max: int = Field(DEFAULT_AGE_MAX, ge=0, description="Oldest eligible age in months (inclusive)")
    strategy_text: str = Field(..., min_length=1)
    script_text: Optional[str] = None
    audio_url: Optional[str] = None
    is_weekly_boost: bool = False
    published: bool = False

    @model_validator(mode="after")
    def _check_age_bounds(self):
        if self.age_min > self.age_max:
            raise ValueError("age_min must be <= age_max")
        return self


class StrategyCreate(StrategyBase):
    """Payload for a creator authoring a strategy."""

    @model_validator(mode="after")
    def _blank_to_none(self):
        # Empty optional text from a form is stored as NULL
        if self.script_text is not None and not self.script_text.strip():
            self.script_text = None
        if self.audio_url is not None and not self.audio_url.strip():
            self.audio_url = None
        return self


class StrategyUpdate(BaseModel):
    """Partial update. creator_id is deliberately absent: authorship never changes."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[StrategyCategory] = None
    age_min: Optional[int] = Field(None, ge=0)
    age_max: Optional[int] = Field(None, ge=0)
    strategy_text: Optional[str] = Field(None, min_length=1)
    script_text: Optional[str] = None
    audio_url: Optional[str] = None
    is_weekly_boost: Optional[bool] = None
    published: Optional[bool] = None

    @model_validator(mode="after")
    def _check_age_bounds(self):
        if self.age_min is not None and self.age_max is not None and self.age_min > self.age_max:
            raise ValueError("age_min must be <= age_max")
        return self


class Strategy(StrategyBase):
    """Full model returned from the database."""
    id: UUID
    creator_id: UUID
    created_at: datetime

    model_config = {"from_attributes": True}


class StrategyDetail(BaseModel):
    """A published strategy as a parent sees it, with their saved state."""
    strategy: Strategy
    age_range_label: str
    eligible: bool
    saved: bool
    worked: bool


class CreatorStats(BaseModel):
    total: int
    published: int
    weekly_boost: int

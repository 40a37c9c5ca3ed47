from datetime import date, datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

Emotion = Literal["happy", "difficult", "proud", "frustrated", "celebration"]


def _strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


class DiaryEntryBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=5000)
    photo_url: Optional[str] = None
    emotion: Emotion
    entry_date: date = Field(default_factory=date.today)

    @field_validator("title", "description")
    @classmethod
    def _strip_text(cls, value: str) -> str:
        return _strip_required(value)


class DiaryEntryCreate(DiaryEntryBase):
    """Payload to write a diary entry. Future dates are accepted."""
    pass


class DiaryEntryUpdate(BaseModel):
    """Payload to update a diary entry: all fields are optional."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1, max_length=5000)
    photo_url: Optional[str] = None
    emotion: Optional[Emotion] = None
    entry_date: Optional[date] = None

    @field_validator("title", "description")
    @classmethod
    def _strip_text(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else _strip_required(value)


class DiaryEntry(DiaryEntryBase):
    """Full model returned from the database."""
    id: UUID
    profile_id: UUID
    created_at: datetime

    model_config = {"from_attributes": True}

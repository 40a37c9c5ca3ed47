from datetime import date, datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from app.utils.age import AgeResult

MainChallenge = Literal["tantrums", "sleep", "listening", "eating", "discipline"]


class ProfileBase(BaseModel):
    parent_name: str = Field(..., min_length=1, max_length=100)
    child_name: str = Field(..., min_length=1, max_length=100)
    child_birthdate: date
    child_gender: Optional[str] = Field(None, max_length=50)
    child_photo_url: Optional[str] = None
    main_challenge: Optional[MainChallenge] = None

    @field_validator("child_birthdate")
    @classmethod
    def _not_in_future(cls, value: date) -> date:
        if value > date.today():
            raise ValueError("child_birthdate cannot be in the future")
        return value


class ProfileCreate(ProfileBase):
    """Onboarding payload. The owning account comes from the access token."""
    pass


class ProfileUpdate(BaseModel):
    """Payload to update a profile: all fields are optional."""
    parent_name: Optional[str] = Field(None, min_length=1, max_length=100)
    child_name: Optional[str] = Field(None, min_length=1, max_length=100)
    child_birthdate: Optional[date] = None
    child_gender: Optional[str] = Field(None, max_length=50)
    child_photo_url: Optional[str] = None
    main_challenge: Optional[MainChallenge] = None

    @field_validator("child_birthdate")
    @classmethod
    def _not_in_future(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and value > date.today():
            raise ValueError("child_birthdate cannot be in the future")
        return value


class Profile(ProfileBase):
    """Full record returned from the database."""
    id: UUID
    user_id: UUID
    created_at: datetime

    model_config = {"from_attributes": True}


class ProfileSummary(BaseModel):
    """Profile page: the record, the child's age and strategy outcome counts."""
    profile: Profile
    child_age: AgeResult
    child_age_label: str
    saved_count: int
    worked_count: int


class Family(Profile):
    """A profile as listed in the creator portal."""
    child_age_label: str


class ProfileStatus(BaseModel):
    has_profile: bool

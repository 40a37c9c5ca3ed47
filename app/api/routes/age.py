"""Age helper endpoint (onboarding preview)."""

from datetime import date

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from app.utils.age import AgeResult, calculate_age, format_age

router = APIRouter(tags=["age"])


class AgeResponse(BaseModel):
    age: AgeResult
    label: str


@router.get("/age", response_model=AgeResponse)
async def get_age(birthdate: date = Query(..., description="YYYY-MM-DD")) -> AgeResponse:
    if birthdate > date.today():
        raise HTTPException(status_code=422, detail="birthdate cannot be in the future")
    return AgeResponse(age=calculate_age(birthdate), label=format_age(birthdate))

"""Input validation on request payloads (rejected before any database call)."""

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from app.models.diary import DiaryEntryCreate, DiaryEntryUpdate
from app.models.profile import ProfileCreate
from app.models.strategy import StrategyCreate, StrategyUpdate


def test_diary_entry_defaults_to_today():
    entry = DiaryEntryCreate(title="Park", description="First slide!", emotion="proud")
    assert entry.entry_date == date.today()


def test_diary_entry_accepts_future_date():
    future = date.today() + timedelta(days=3)
    entry = DiaryEntryCreate(title="Trip", description="Planned", emotion="happy", entry_date=future)
    assert entry.entry_date == future


@pytest.mark.parametrize("field", ["title", "description"])
def test_diary_entry_rejects_blank_text(field):
    data = {"title": "Park", "description": "Slide", "emotion": "happy", field: "   "}
    with pytest.raises(ValidationError):
        DiaryEntryCreate(**data)


def test_diary_entry_rejects_unknown_emotion():
    with pytest.raises(ValidationError):
        DiaryEntryCreate(title="Park", description="Slide", emotion="bored")


def test_diary_entry_requires_emotion():
    with pytest.raises(ValidationError):
        DiaryEntryCreate(title="Park", description="Slide")


def test_diary_update_strips_text():
    assert DiaryEntryUpdate(title="  Nap  ").title == "Nap"


def test_strategy_age_bounds_ordered():
    with pytest.raises(ValidationError):
        StrategyCreate(title="X", category="sleep", strategy_text="Y", age_min=30, age_max=12)


def test_strategy_rejects_negative_age():
    with pytest.raises(ValidationError):
        StrategyCreate(title="X", category="sleep", strategy_text="Y", age_min=-1)


def test_strategy_create_defaults():
    s = StrategyCreate(title="X", category="listening", strategy_text="Y", script_text="  ")
    assert (s.age_min, s.age_max) == (0, 144)
    assert s.published is False and s.is_weekly_boost is False
    assert s.script_text is None


def test_strategy_update_checks_bounds_when_both_given():
    with pytest.raises(ValidationError):
        StrategyUpdate(age_min=10, age_max=5)
    assert StrategyUpdate(age_min=10).age_max is None


def test_strategy_update_has_no_creator_field():
    assert "creator_id" not in StrategyUpdate.model_fields


def test_profile_rejects_future_birthdate():
    with pytest.raises(ValidationError):
        ProfileCreate(
            parent_name="Sam", child_name="Maya",
            child_birthdate=date.today() + timedelta(days=1),
        )


def test_profile_rejects_unknown_challenge():
    with pytest.raises(ValidationError):
        ProfileCreate(
            parent_name="Sam", child_name="Maya",
            child_birthdate=date(2023, 1, 1), main_challenge="homework",
        )

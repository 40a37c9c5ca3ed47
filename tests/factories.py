"""Model factories for tests that don't touch the database."""

from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from app.models.profile import Profile
from app.models.strategy import Strategy

PARENT_ID = UUID("11111111-1111-1111-1111-111111111111")
CREATOR_ID = UUID("22222222-2222-2222-2222-222222222222")


def make_profile(**overrides) -> Profile:
    data = dict(
        id=uuid4(),
        user_id=PARENT_ID,
        parent_name="Sam",
        child_name="Maya",
        child_birthdate=date(2023, 4, 10),
        created_at=datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc),
    )
    data.update(overrides)
    return Profile(**data)


def make_strategy(**overrides) -> Strategy:
    data = dict(
        id=uuid4(),
        creator_id=CREATOR_ID,
        title="Bedtime countdown",
        category="sleep",
        age_min=0,
        age_max=24,
        strategy_text="Give a five-minute and a one-minute warning before lights out.",
        published=True,
        created_at=datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc),
    )
    data.update(overrides)
    return Strategy(**data)

"""Child age helpers: calendar age, display strings, eligibility range labels.

All differences truncate toward the earlier date: a child born on the 15th is
not one month old on the 14th of the following month. Month and year
arithmetic goes through ``relativedelta`` so end-of-month birthdays clamp
(Jan 31 + 1 month = Feb 28/29, Feb 29 + 1 year = Feb 28).
"""

from datetime import date, datetime
from typing import Optional, Union

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel

DateLike = Union[date, datetime, str]


class AgeResult(BaseModel):
    years: int
    months: int
    days: int
    total_months: int


def _to_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # "2024-01-15" or a full ISO timestamp; only the calendar date matters
    return date.fromisoformat(value.strip()[:10])


def _month_diff(later: date, earlier: date) -> int:
    delta = relativedelta(later, earlier)
    return delta.years * 12 + delta.months


def calculate_age(birthdate: DateLike, today: Optional[date] = None) -> AgeResult:
    """Elapsed time since ``birthdate`` as of ``today`` (local date of the call by default).

    ``total_months`` is computed directly from the calendar-month difference,
    not rebuilt from ``years`` and ``months``.
    """
    birth = _to_date(birthdate)
    now = today or date.today()

    total_months = _month_diff(now, birth)
    years = relativedelta(now, birth).years

    after_years = birth + relativedelta(years=years)
    months = _month_diff(now, after_years)

    after_months = after_years + relativedelta(months=months)
    days = (now - after_months).days

    return AgeResult(years=years, months=months, days=days, total_months=total_months)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_age(birthdate: DateLike, today: Optional[date] = None) -> str:
    """Human phrase such as "20 days old" or "1 year, 2 months old"."""
    age = calculate_age(birthdate, today)

    if age.years == 0:
        if age.months == 0:
            return f"{_plural(age.days, 'day')} old"
        return f"{_plural(age.months, 'month')} old"

    if age.months == 0:
        return f"{_plural(age.years, 'year')} old"

    return f"{_plural(age.years, 'year')}, {_plural(age.months, 'month')} old"


def _format_months(months: int) -> str:
    if months < 12:
        return f"{months}mo"
    years, remainder = divmod(months, 12)
    if remainder == 0:
        return f"{years}yr"
    return f"{years}yr {remainder}mo"


def format_age_range(min_months: int, max_months: int) -> str:
    """Compact eligibility label, e.g. ``format_age_range(6, 18) == "6mo - 1yr 6mo"``."""
    return f"{_format_months(min_months)} - {_format_months(max_months)}"

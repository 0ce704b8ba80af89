from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Optional, Union

from ..core.constants import MONTH_NAMES
from ..core.exceptions import ValidationError

MonthLike = Union[int, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def try_parse_iso_date(value: Optional[str]) -> Optional[date]:
    """Like :func:`parse_iso_date` but returns None for blank or malformed input."""
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        return None


def date_string(year: int, month: int, day: Union[int, str]) -> str:
    return f"{int(year):04d}-{int(month):02d}-{int(day):02d}"


def days_in_month(month: int, year: int) -> int:
    return calendar.monthrange(int(year), int(month))[1]


def days_array(month: int, year: int) -> list[str]:
    """Zero-padded day strings ("01", "02", ...) for a 1-based month."""
    return [f"{day:02d}" for day in range(1, days_in_month(month, year) + 1)]


def normalize_month(value: MonthLike) -> int:
    """Normalize a month given as 1-based index, numeric text or English name.

    >>> normalize_month(3), normalize_month("03"), normalize_month("march")
    (3, 3, 3)
    """
    if isinstance(value, int) and not isinstance(value, bool):
        month = value
    else:
        text = str(value or "").strip()
        if text.isdigit():
            month = int(text)
        else:
            lowered = [name.lower() for name in MONTH_NAMES]
            if text.lower() not in lowered:
                raise ValidationError(f"Unknown month: {value!r}")
            month = lowered.index(text.lower()) + 1

    if not 1 <= month <= 12:
        raise ValidationError(f"Month out of range: {value!r}")
    return month


def normalize_year(value: Union[int, str]) -> int:
    try:
        year = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid year: {value!r}")
    if not 1 <= year <= 9999:
        raise ValidationError(f"Year out of range: {value!r}")
    return year


def month_name(month: int) -> str:
    return MONTH_NAMES[int(month) - 1]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()

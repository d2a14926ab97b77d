from __future__ import annotations

import calendar
from datetime import MAXYEAR, MINYEAR, date, datetime, time
from typing import Optional, Union

from ..core.constants import MONTHS
from ..core.exceptions import ValidationError


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_optional_time(value: Optional[str], field_name: str) -> Optional[time]:
    """Parse HH:MM or HH:MM:SS; empty values give None."""
    if value is None or not str(value).strip():
        return None
    text = str(value).strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"{field_name} must be HH:MM")


def normalize_month(value: Union[int, str]) -> int:
    """Return a 1-based month index from an index, numeric string or month name.

    Names are matched case-insensitively, full or three-letter abbreviation.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid month: {value!r}")

    if isinstance(value, int):
        month = value
    else:
        text = str(value).strip()
        if text.isascii() and text.isdigit():
            month = int(text)
        else:
            lowered = text.lower()
            month = 0
            for idx, name in enumerate(MONTHS, start=1):
                if lowered == name.lower() or (len(lowered) == 3 and name.lower().startswith(lowered)):
                    month = idx
                    break

    if not 1 <= month <= 12:
        raise ValidationError(f"Invalid month: {value!r}")
    return month


def normalize_year(value: Union[int, str]) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid year: {value!r}")

    text = str(value).strip()
    if len(text) != 4 or not (text.isascii() and text.isdigit()):
        raise ValidationError(f"Invalid year: {value!r}")
    year = int(text)
    if not MINYEAR <= year <= MAXYEAR:
        raise ValidationError(f"Invalid year: {value!r}")
    return year


def days_in_month(month: int, year: int) -> int:
    # Uses the queried year, so February follows that year's leap rule.
    return calendar.monthrange(year, month)[1]


def month_bounds(month: int, year: int) -> tuple[datetime, datetime]:
    """Inclusive [start, end] datetime window covering every day of the month."""
    start = datetime(year, month, 1)
    end = datetime.combine(date(year, month, days_in_month(month, year)), time.max)
    return start, end

"""Date manipulation utilities"""

import calendar
import re
from datetime import date, datetime
from typing import Any, Optional

_YEAR_MONTH = re.compile(r"^(\d{4})-(\d{1,2})$")
_YEAR_ONLY = re.compile(r"^(\d{4})$")


def subtract_months(from_date: date, months: int) -> date:
    """Step back whole calendar months, clamping the day to the target month's length"""
    total = from_date.year * 12 + (from_date.month - 1) - months
    year, month = divmod(total, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(from_date.day, last_day))


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a loosely formatted date from form input.

    Accepts date/datetime objects, ISO dates and datetimes, "YYYY-MM" and a bare
    "YYYY". Returns None for anything else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    # date() rejects year 0 and month 13 alike
    match = _YEAR_MONTH.match(text)
    if match:
        try:
            return date(int(match.group(1)), int(match.group(2)), 1)
        except ValueError:
            return None

    match = _YEAR_ONLY.match(text)
    if match:
        try:
            return date(int(match.group(1)), 1, 1)
        except ValueError:
            return None

    return None

# app/attendance_module/calendar_utils.py
"""
Date arithmetic shared by the attendance calculator and the holiday planner.
All ranges are inclusive of both ends.
"""
import calendar
from datetime import MAXYEAR, date, timedelta
from typing import Iterator, List, Optional

from errors import InvalidInputError

SATURDAY = 5
SUNDAY = 6


def validate_period(start_date: date, end_date: date) -> None:
    """Raise InvalidInputError when the planning period is reversed."""
    if start_date > end_date:
        raise InvalidInputError(
            f"Invalid date range: start date {start_date.isoformat()} is after end date {end_date.isoformat()}."
        )


def iter_days(start_date: date, end_date: date) -> Iterator[date]:
    """Yield every calendar day from start_date to end_date."""
    current = start_date
    while current <= end_date:
        yield current
        if current == end_date:
            break
        current += timedelta(days=1)


def is_weekend(day: date) -> bool:
    return day.weekday() >= SATURDAY


def count_working_days(start_date: date, end_date: date) -> int:
    """Count Monday-Friday days in the period. Holidays are not subtracted."""
    return sum(1 for day in iter_days(start_date, end_date) if not is_weekend(day))


def weekend_dates(start_date: date, end_date: date) -> List[date]:
    """Every Saturday and Sunday in the period."""
    return [day for day in iter_days(start_date, end_date) if is_weekend(day)]


def add_months(day: date, months: int) -> Optional[date]:
    """
    Shift a date by whole months, clamping the day to the target month's length
    (Jan 31 + 1 month -> Feb 28/29). Returns None past the last representable year.
    """
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    if year > MAXYEAR:
        return None
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def shift_days(day: date, days: int) -> date:
    """day + days, clamped to the representable date range."""
    try:
        return day + timedelta(days=days)
    except OverflowError:
        return date.max if days > 0 else date.min


def point_in_period(start_date: date, end_date: date, fraction: float) -> date:
    """Date lying `fraction` of the way through the period (0.5 is the midpoint)."""
    span = (end_date - start_date).days
    return start_date + timedelta(days=int(span * fraction))


def midpoint(start_date: date, end_date: date) -> date:
    return point_in_period(start_date, end_date, 0.5)


def years_spanned(start_date: date, end_date: date) -> range:
    return range(start_date.year, end_date.year + 1)


def in_period(day: date, start_date: date, end_date: date) -> bool:
    return start_date <= day <= end_date

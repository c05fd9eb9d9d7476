# app/calendar_module/holiday_planner.py
from datetime import date, timedelta
from typing import Dict, Any, List, Optional

import config
from errors import InvalidInputError
from attendance_module.calendar_utils import validate_period, weekend_dates, years_spanned
from calendar_module.holiday_provider import HolidayProvider, holiday_provider, lookup_holidays

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY = range(5)


def _long_weekend(start: date, end: date, holiday: Dict[str, Any], leave_days: int, days_off: int, description: str):
    return {
        "startDate": start,
        "endDate": end,
        "holidayName": holiday["name"],
        "leaveDaysRequired": leave_days,
        "totalDaysOff": days_off,
        "description": description,
    }


def suggest_long_weekend(holiday: Dict[str, Any], start_date: date, end_date: date) -> Optional[Dict[str, Any]]:
    """
    Leave days that turn a weekday holiday into a 4- or 5-day break.
    Returns None for weekend holidays or when the leave day falls outside the period.
    """
    holiday_date = holiday["date"]
    name = holiday["name"]
    weekday = holiday_date.weekday()
    days_before = (holiday_date - start_date).days
    days_after = (end_date - holiday_date).days

    if weekday == MONDAY and days_before >= 3:
        return _long_weekend(holiday_date - timedelta(days=3), holiday_date, holiday, 1, 4,
                             f"Take Friday off before {name} for a 4-day weekend")
    if weekday == FRIDAY and days_after >= 3:
        return _long_weekend(holiday_date, holiday_date + timedelta(days=3), holiday, 1, 4,
                             f"Take Monday off after {name} for a 4-day weekend")
    if weekday == TUESDAY and days_before >= 1:
        return _long_weekend(holiday_date - timedelta(days=1), holiday_date, holiday, 1, 4,
                             f"Take Monday off before {name} for a 4-day weekend")
    if weekday == THURSDAY and days_after >= 1:
        return _long_weekend(holiday_date, holiday_date + timedelta(days=1), holiday, 1, 4,
                             f"Take Friday off after {name} for a 4-day weekend")
    if weekday == WEDNESDAY and days_after >= 2:
        return _long_weekend(holiday_date, holiday_date + timedelta(days=2), holiday, 2, 5,
                             f"Take Thursday and Friday off after {name} for a 5-day weekend")
    return None


def generate_long_weekend_suggestions(
    holidays: List[Dict[str, Any]], start_date: date, end_date: date
) -> List[Dict[str, Any]]:
    suggestions = []
    for holiday in holidays:
        suggestion = suggest_long_weekend(holiday, start_date, end_date)
        if suggestion:
            suggestions.append(suggestion)
    suggestions.sort(key=lambda s: s["startDate"])
    return suggestions


def get_public_holidays(
    start_date: date,
    end_date: date,
    country: str = config.DEFAULT_COUNTRY,
    provider: HolidayProvider = holiday_provider,
    max_years: int = config.HOLIDAY_MAX_YEARS,
) -> Dict[str, Any]:
    """
    Public holidays, weekends and long-weekend ideas for a period.

    Args:
        start_date (date): First day of the period (inclusive).
        end_date (date): Last day of the period (inclusive).
        country (str): ISO 3166-1 alpha-2 country code.
        provider (HolidayProvider): Source of live holiday data.
        max_years (int): Most calendar years one lookup may span.

    Returns:
        dict: holidays, weekends, suggestedLongWeekends and the data source
              ("live" or "fallback").

    Raises:
        InvalidInputError: If the period is reversed or spans more than
            max_years calendar years.
    """
    validate_period(start_date, end_date)
    years = len(years_spanned(start_date, end_date))
    if years > max_years:
        raise InvalidInputError(
            f"Holiday lookups are limited to {max_years} calendar years, the period spans {years}."
        )
    holidays, source = lookup_holidays(start_date, end_date, country, provider)

    return {
        "holidays": holidays,
        "weekends": weekend_dates(start_date, end_date),
        "suggestedLongWeekends": generate_long_weekend_suggestions(holidays, start_date, end_date),
        "source": source,
    }

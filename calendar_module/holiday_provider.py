# app/calendar_module/holiday_provider.py
"""
Public holiday lookup.

Live data comes from the Nager.Date API (one request per year, no API key).
When the API is unreachable or returns nothing, the offline calendars of the
`holidays` package are used instead and the result is marked as "fallback"
so callers can tell the provider's data from the local approximation.
"""
import logging
from datetime import date
from typing import Dict, Any, List, Optional

import holidays
import httpx

import config
from errors import HolidayProviderError
from attendance_module.calendar_utils import in_period, years_spanned

logger = logging.getLogger("holiday-planner.holidays")

SOURCE_LIVE = "live"
SOURCE_FALLBACK = "fallback"

TYPE_LABELS = {"national": "National", "religious": "Religious", "public": "Public"}


def make_holiday(day: date, name: str, holiday_type: str) -> Dict[str, Any]:
    return {
        "date": day,
        "name": name,
        "type": holiday_type,
        "description": f"{name} - {TYPE_LABELS[holiday_type]} Holiday",
    }


class HolidayProvider:
    """Thin client for the Nager.Date public holiday endpoint."""

    def __init__(
        self,
        base_url: str = config.HOLIDAY_API_BASE_URL,
        timeout: float = config.HOLIDAY_API_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def client(self) -> httpx.Client:
        """HTTP client to share across the years of one lookup."""
        return httpx.Client(timeout=self.timeout, transport=self.transport)

    def fetch_year(self, year: int, country: str, client: Optional[httpx.Client] = None) -> List[Dict[str, Any]]:
        """
        Returns the raw `{date, name, global}` entries for one year.

        Raises:
            HolidayProviderError: On network errors, non-2xx answers or a body
                that is not a list.
        """
        if client is None:
            with self.client() as own_client:
                return self.fetch_year(year, country, client=own_client)

        url = f"{self.base_url}/PublicHolidays/{year}/{country}"
        try:
            response = client.get(url)
            response.raise_for_status()
            if response.status_code == 204 or not response.content:
                return []
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise HolidayProviderError(f"Holiday lookup failed for {country}/{year}: {e}") from e

        if not isinstance(payload, list):
            raise HolidayProviderError(f"Unexpected holiday payload for {country}/{year}")
        return payload


def fetch_live_holidays(
    provider: HolidayProvider, start_date: date, end_date: date, country: str
) -> Optional[List[Dict[str, Any]]]:
    """
    Live holidays inside the period, or None when no year produced any data.

    A failing year is logged and skipped, the remaining years are still used.
    """
    holidays_found = []
    answered = False
    with provider.client() as client:
        for year in years_spanned(start_date, end_date):
            try:
                entries = provider.fetch_year(year, country, client=client)
            except HolidayProviderError as e:
                logger.warning(
                    f"Failed to fetch holidays for year {year}: {e}",
                    extra={"country": country, "year": year, "source": SOURCE_LIVE},
                )
                continue
            if entries:
                answered = True
            for entry in entries:
                try:
                    holiday_date = date.fromisoformat(entry["date"])
                    name = entry["name"]
                except (KeyError, TypeError, ValueError):
                    logger.warning(
                        f"Skipping malformed holiday entry: {entry!r}",
                        extra={"country": country, "year": year, "source": SOURCE_LIVE},
                    )
                    continue
                if in_period(holiday_date, start_date, end_date):
                    holiday_type = "national" if entry.get("global") else "public"
                    holidays_found.append(make_holiday(holiday_date, name, holiday_type))

    if not answered:
        return None
    holidays_found.sort(key=lambda h: h["date"])
    return holidays_found


def fallback_holidays(start_date: date, end_date: date, country: str) -> List[Dict[str, Any]]:
    """
    Nationwide holidays for the period from the offline `holidays` calendars.
    Countries the package does not know get no holidays.
    """
    years = list(years_spanned(start_date, end_date))
    try:
        country_calendar = holidays.country_holidays(country.upper(), years=years)
    except NotImplementedError:
        logger.warning(
            f"No offline holiday calendar for {country}, returning no holidays",
            extra={"country": country, "source": SOURCE_FALLBACK},
        )
        return []

    return [
        make_holiday(holiday_date, name, "national")
        for holiday_date, name in sorted(country_calendar.items())
        if in_period(holiday_date, start_date, end_date)
    ]


def lookup_holidays(
    start_date: date, end_date: date, country: str, provider: HolidayProvider
) -> tuple:
    """Returns (holidays, source) where source is "live" or "fallback"."""
    live = fetch_live_holidays(provider, start_date, end_date, country)
    if live is not None:
        logger.info(
            f"Using live holidays for {country}",
            extra={"country": country, "source": SOURCE_LIVE},
        )
        return live, SOURCE_LIVE

    logger.warning(
        f"Holiday API unavailable for {country}, using offline calendar",
        extra={"country": country, "source": SOURCE_FALLBACK},
    )
    return fallback_holidays(start_date, end_date, country), SOURCE_FALLBACK


# Global instance to be shared between API and CLI
holiday_provider = HolidayProvider()

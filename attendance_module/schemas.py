# app/attendance_module/schemas.py
from datetime import date
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

UserType = Literal["student", "employee"]


# Pydantic Model for incoming requests
class CalculateAttendanceRequest(BaseModel):
    startDate: date
    endDate: date
    attendanceRule: int = Field(..., ge=1, le=100)
    userType: UserType
    currentAttendancePercentage: Optional[float] = Field(None, ge=0, le=100)
    leavesAvailedAlready: int = Field(0, ge=0)
    institutionType: Optional[str] = None
    examDates: Optional[str] = None
    projectDeadlines: Optional[str] = None


class SuggestedLeaveDate(BaseModel):
    date: date
    reason: str
    type: Literal["single", "long_weekend", "festival", "extended"]
    duration: int
    description: str


class OptimalLeaveDate(BaseModel):
    startDate: date
    endDate: date
    duration: int
    reason: str
    impact: Literal["low", "medium", "high"]
    aiScore: int = Field(..., ge=0, le=100)
    description: str
    benefits: List[str]


class AttendanceCalculation(BaseModel):
    totalDays: int
    requiredDays: int
    safeLeaveDays: int
    currentAttendancePercentage: float
    projectedAttendancePercentage: float
    isAtRisk: bool
    recommendations: List[str]
    warnings: List[str]
    suggestedHolidayDates: List[str] = []
    suggestedLeaveDates: List[SuggestedLeaveDate] = []
    optimalLeaveDates: List[OptimalLeaveDate] = []

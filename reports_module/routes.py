# app/reports_module/routes.py
from datetime import date
from typing import List, Literal, Optional
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from errors import ReportGenerationError
from reports_module.report_builder import generate_report

router = APIRouter()


class ReportAttendanceData(BaseModel):
    totalDays: int
    requiredDays: int
    safeLeaveDays: int
    attendanceRule: int
    recommendations: List[str] = []
    warnings: List[str] = []
    suggestedHolidayDates: Optional[List[str]] = None


class ReportUserInfo(BaseModel):
    userType: Literal["student", "employee"]
    startDate: date
    endDate: date
    institutionType: Optional[str] = None
    projectDeadlines: Optional[str] = None


# Pydantic Model for incoming requests
class ExportRequest(BaseModel):
    attendanceData: ReportAttendanceData
    userInfo: ReportUserInfo
    format: Literal["pdf", "excel"]


class ExportResponse(BaseModel):
    downloadUrl: str
    filename: str
    fileContent: str


# --- API ENDPOINTS ---
@router.post("/generate", response_model=ExportResponse)
def export_report(request: ExportRequest):
    """Generates a PDF-ready HTML or CSV report of an attendance calculation."""
    try:
        return generate_report(
            request.attendanceData.model_dump(),
            request.userInfo.model_dump(),
            request.format,
        )
    except ReportGenerationError as e:
        raise HTTPException(status_code=500, detail=f"Error generating report: {str(e)}")

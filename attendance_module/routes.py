# app/attendance_module/routes.py
import logging
from fastapi import APIRouter

from attendance_module.core_calculator import calculate_attendance
from attendance_module.planning_hints import PlanningHints
from attendance_module.schemas import AttendanceCalculation, CalculateAttendanceRequest

# Create an APIRouter instead of a FastAPI app
router = APIRouter()
logger = logging.getLogger("holiday-planner.attendance")


# --- API ENDPOINTS ---
@router.post("/calculate", response_model=AttendanceCalculation)
def calculate(request: CalculateAttendanceRequest):
    """
    Calculates safe leave days for a period and suggests when to take them.
    InvalidInputError is turned into a 422 by the app-level handler.
    """
    hints = PlanningHints(
        institution_type=request.institutionType,
        exam_dates=request.examDates,
        project_deadlines=request.projectDeadlines,
    )
    result = calculate_attendance(
        start_date=request.startDate,
        end_date=request.endDate,
        attendance_rule=request.attendanceRule,
        user_type=request.userType,
        current_attendance_percentage=request.currentAttendancePercentage,
        leaves_availed_already=request.leavesAvailedAlready,
        hints=hints,
    )
    logger.info(
        f"Attendance calculated for {request.userType}: {result['totalDays']} working days, "
        f"{result['safeLeaveDays']} safe leave days",
        extra={"user_type": request.userType},
    )
    return result

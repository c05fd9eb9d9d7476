# app/attendance_module/core_calculator.py
import math
from datetime import date
from typing import Dict, Any, List, Optional

from errors import InvalidInputError
from attendance_module.calendar_utils import count_working_days, validate_period
from attendance_module.planning_hints import PlanningHints, STUDENT, USER_TYPES
from attendance_module.leave_suggestions import (
    generate_optimal_leave_dates,
    generate_suggested_leave_dates,
)

HIGH_RISK_LIMIT = 5
BUFFER_THRESHOLD = 10


def validate_inputs(
    start_date: date,
    end_date: date,
    attendance_rule: int,
    user_type: str,
    current_attendance_percentage: Optional[float],
    leaves_availed_already: int,
) -> None:
    """Reject requests the arithmetic below cannot give a meaningful answer for."""
    validate_period(start_date, end_date)
    if not 1 <= attendance_rule <= 100:
        raise InvalidInputError(f"Attendance rule must be between 1 and 100, got {attendance_rule}.")
    if user_type not in USER_TYPES:
        raise InvalidInputError(f"Unknown user type '{user_type}', expected one of {', '.join(USER_TYPES)}.")
    if current_attendance_percentage is not None and not 0 <= current_attendance_percentage <= 100:
        raise InvalidInputError(
            f"Current attendance percentage must be between 0 and 100, got {current_attendance_percentage}."
        )
    if leaves_availed_already < 0:
        raise InvalidInputError(f"Leaves availed already cannot be negative, got {leaves_availed_already}.")


def required_days_for(total_days: int, attendance_rule: int) -> int:
    """ceil(total_days * rule / 100) without going through floats."""
    return -(-total_days * attendance_rule // 100)


def calculate_attendance(
    start_date: date,
    end_date: date,
    attendance_rule: int,
    user_type: str,
    current_attendance_percentage: Optional[float] = None,
    leaves_availed_already: int = 0,
    hints: Optional[PlanningHints] = None,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """
    Works out how many days can safely be missed in a period.

    Args:
        start_date (date): First day of the planning period (inclusive).
        end_date (date): Last day of the planning period (inclusive).
        attendance_rule (int): Minimum attendance percentage, 1-100.
        user_type (str): "student" or "employee". Changes wording only.
        current_attendance_percentage (float): Attendance already accrued, 0-100.
        leaves_availed_already (int): Absence days already used.
        hints (PlanningHints): Optional context that selects extra advice.
        today (date): Reference date for "from now" suggestions.

    Returns:
        dict: The full calculation including recommendations, warnings and
              suggested/optimal leave dates.

    Raises:
        InvalidInputError: If the period is reversed or a value is out of range.
    """
    hints = hints or PlanningHints()
    today = today or date.today()
    validate_inputs(
        start_date, end_date, attendance_rule, user_type,
        current_attendance_percentage, leaves_availed_already,
    )

    # --- Day Arithmetic ---
    total_days = count_working_days(start_date, end_date)
    required_days = required_days_for(total_days, attendance_rule)

    current_attendance_days = 0
    if current_attendance_percentage is not None:
        current_attendance_days = math.floor(total_days * current_attendance_percentage / 100)

    remaining_days = total_days - current_attendance_days - leaves_availed_already
    remaining_required_days = max(0, required_days - current_attendance_days)
    safe_leave_days = max(0, remaining_days - remaining_required_days)

    recommendations, warnings, holiday_hints = build_advice(
        safe_leave_days, remaining_days, attendance_rule, user_type, hints
    )

    return {
        "totalDays": total_days,
        "requiredDays": required_days,
        "safeLeaveDays": safe_leave_days,
        "currentAttendancePercentage": current_attendance_percentage or 0,
        "projectedAttendancePercentage": attendance_rule,
        "isAtRisk": safe_leave_days <= 0,
        "recommendations": recommendations,
        "warnings": warnings,
        "suggestedHolidayDates": holiday_hints,
        "suggestedLeaveDates": generate_suggested_leave_dates(
            start_date, end_date, safe_leave_days, user_type, hints, today
        ),
        "optimalLeaveDates": generate_optimal_leave_dates(
            start_date, end_date, safe_leave_days, user_type
        ),
    }


def build_advice(
    safe_leave_days: int,
    remaining_days: int,
    attendance_rule: int,
    user_type: str,
    hints: PlanningHints,
) -> tuple:
    """Returns (recommendations, warnings, suggested holiday hints) for a result."""
    recommendations: List[str] = []
    warnings: List[str] = []
    holiday_hints: List[str] = []

    if safe_leave_days > 0:
        recommendations.append(
            f"🎯 AI Analysis: You can safely take {safe_leave_days} days off while maintaining {attendance_rule}% attendance."
        )
        if user_type == STUDENT:
            _student_advice(hints, recommendations, warnings, holiday_hints)
        else:
            _employee_advice(hints, recommendations, warnings, holiday_hints)

        if safe_leave_days >= 15:
            recommendations.append("🚀 Excellent Buffer: You have great flexibility for planning extended trips or multiple short breaks.")
            recommendations.append("🎯 Strategic Advice: Consider spreading your leaves across the period for optimal work-life balance.")
        elif safe_leave_days >= 10:
            recommendations.append("✅ Good Flexibility: You can plan 1-2 week-long trips or several long weekends.")
            recommendations.append("🔄 Balance Strategy: Mix short breaks with one longer vacation for best results.")
        elif safe_leave_days >= 5:
            recommendations.append("⚖️ Moderate Buffer: Focus on strategic long weekends and essential personal time.")
            recommendations.append("🎲 Smart Planning: Combine public holidays with your leave days for maximum impact.")
    else:
        warnings.append(
            f"🚨 Critical Alert: You need to attend ALL remaining {remaining_days} days to meet the {attendance_rule}% requirement."
        )
        warnings.append("⛔ Zero Tolerance: Any absence will put you below the minimum attendance threshold.")
        recommendations.append("🎯 Emergency Plan: Focus on perfect attendance for the remaining period.")
        recommendations.append("🤝 Seek Support: Consider discussing your situation with your supervisor/academic advisor.")

    if 0 < safe_leave_days <= HIGH_RISK_LIMIT:
        warnings.append("⚠️ High Risk Zone: You have very limited leave days. Plan carefully, every absence counts!")
        recommendations.append("🔍 Micro-Management: Consider taking half-days or shorter breaks instead of full days.")
        recommendations.append("📱 Stay Alert: Track your attendance status daily.")

    if safe_leave_days > BUFFER_THRESHOLD:
        recommendations.append("🛡️ Safety Buffer: Keep 20% of your safe days as emergency reserve for unexpected situations.")
        recommendations.append("🎨 Creative Planning: You have freedom to plan creative holiday combinations.")

    return recommendations, warnings, holiday_hints


def _student_advice(hints, recommendations, warnings, holiday_hints):
    if hints.institution_type == "university":
        recommendations.append("🎓 Smart Strategy: Plan leaves during reading weeks or between semesters for optimal academic performance.")
    elif hints.institution_type == "college":
        recommendations.append("🔬 Academic Tip: Avoid leaves during practical sessions and lab work to minimize academic impact.")

    if hints.has_exam_dates:
        recommendations.append("📚 Exam Strategy: Avoid taking leaves 2 weeks before major exams for better preparation.")
        warnings.append("⚠️ Exam Alert: Plan carefully around your exam dates to maintain study momentum.")

    recommendations.append("💡 Pro Tip: Consider taking half-days instead of full days during important lecture series.")

    holiday_hints.append("🌟 Mid-semester break (optimal for mental health)")
    holiday_hints.append("🎉 Long weekends during festival seasons")
    holiday_hints.append("🎊 Post-exam celebration periods")


def _employee_advice(hints, recommendations, warnings, holiday_hints):
    if hints.has_project_deadlines:
        recommendations.append("💼 Work Strategy: Plan leaves after major project deliverables for stress-free holidays.")
        warnings.append("⚠️ Project Alert: Avoid taking leaves during critical project phases.")

    recommendations.append("🏢 Corporate Tip: Take leaves during company holidays for extended breaks.")
    recommendations.append("🧘 Wellness Advice: Plan mental health days during high-stress periods.")

    holiday_hints.append("🌴 Extended weekends around public holidays")
    holiday_hints.append("📊 End of quarter periods (if workload permits)")
    holiday_hints.append("☀️ Summer vacation season (June-August)")
    holiday_hints.append("🎄 Year-end holiday season (December)")

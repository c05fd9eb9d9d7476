# app/attendance_module/leave_suggestions.py
"""
Heuristic leave date generation.

Two independent generators live here:
  * generate_suggested_leave_dates: single anchor dates (festivals, mid-month
    Fridays, user-type breaks), capped at 80% of the safe leave days.
  * generate_optimal_leave_dates: scored date ranges ranked by a fixed
    aiScore, capped at 10 entries.

Neither generator knows about real public holidays; that is the holiday
planner's job.
"""
from datetime import date, timedelta
from typing import Dict, Any, List

from attendance_module.calendar_utils import (
    add_months,
    in_period,
    midpoint,
    shift_days,
    years_spanned,
)
from attendance_module.planning_hints import PlanningHints, STUDENT

MONDAY = 0
FRIDAY = 4
WELLNESS_DAY_OF_MONTH = 15
POST_EXAM_OFFSET_DAYS = 30
POST_PROJECT_OFFSET_DAYS = 45
MAX_OPTIMAL_PERIODS = 10

# --- SUGGESTION TABLES ---
# (name, month, approximate day, leave days)
FESTIVALS = [
    ("Diwali", 11, 15, 3),
    ("Christmas", 12, 25, 2),
    ("New Year", 1, 1, 2),
    ("Holi", 3, 15, 2),
    ("Eid", 5, 15, 2),
    ("Dussehra", 10, 15, 2),
]

# Windows are centred on the 15th of the month.
SEASONAL_WINDOWS = [
    {
        "name": "Diwali",
        "month": 11,
        "duration": 5,
        "aiScore": 95,
        "impact": "low",
        "benefits": ["Festival celebration", "Family time", "Cultural significance", "Extended weekend potential"],
    },
    {
        "name": "Christmas & New Year",
        "month": 12,
        "duration": 7,
        "aiScore": 98,
        "impact": "low",
        "benefits": ["Year-end break", "Holiday season", "Global celebration", "Natural work slowdown"],
    },
    {
        "name": "Summer Break",
        "month": 5,
        "duration": 10,
        "aiScore": 90,
        "impact": "medium",
        "benefits": ["Perfect weather", "Travel season", "School holidays", "Vitamin D boost"],
    },
    {
        "name": "Holi Celebration",
        "month": 3,
        "duration": 3,
        "aiScore": 85,
        "impact": "low",
        "benefits": ["Spring festival", "Cultural celebration", "Weekend extension", "Social bonding"],
    },
]

QUARTER_END_MONTHS = (3, 6, 9, 12)
QUARTER_END_DAY = 25


def suggestion_cap(safe_leave_days: int) -> int:
    """Never suggest more dates than 80% of what can safely be taken."""
    return max(0, safe_leave_days) * 4 // 5


def _suggestion(day: date, reason: str, kind: str, duration: int, description: str) -> Dict[str, Any]:
    return {
        "date": day,
        "reason": reason,
        "type": kind,
        "duration": duration,
        "description": description,
    }


def _festival_suggestions(start_date: date, end_date: date) -> List[Dict[str, Any]]:
    suggestions = []
    for year in years_spanned(start_date, end_date):
        for name, month, day_of_month, duration in FESTIVALS:
            festival_date = date(year, month, day_of_month)
            if not in_period(festival_date, start_date, end_date):
                continue
            weekday = festival_date.weekday()
            if weekday > FRIDAY:
                continue
            if weekday in (MONDAY, FRIDAY):
                suggestions.append(_suggestion(
                    festival_date,
                    f"{name} Long Weekend Strategy",
                    "long_weekend",
                    duration,
                    f"AI recommends taking {duration} days around {name} for a 4-day weekend celebration",
                ))
            else:
                suggestions.append(_suggestion(
                    festival_date,
                    f"{name} Cultural Celebration",
                    "festival",
                    duration,
                    f"Optimal time for {name} celebration with family and cultural activities",
                ))
    return suggestions


def generate_suggested_leave_dates(
    start_date: date,
    end_date: date,
    safe_leave_days: int,
    user_type: str,
    hints: PlanningHints,
    today: date,
) -> List[Dict[str, Any]]:
    """
    Build single-date leave suggestions for the period.

    Args:
        start_date: First day of the planning period.
        end_date: Last day of the planning period.
        safe_leave_days: Days that can be taken without breaking the rule.
        user_type: "student" or "employee".
        hints: Optional request context; enables post-exam/post-project dates.
        today: Reference date for the post-exam and post-project offsets.

    Returns:
        list: Suggestions sorted by date, at most 80% of safe_leave_days long.
    """
    if safe_leave_days <= 0:
        return []

    suggestions = _festival_suggestions(start_date, end_date)

    # Mid-month Fridays make a 3-day weekend
    probe = date(start_date.year, start_date.month, WELLNESS_DAY_OF_MONTH)
    while probe is not None and probe <= end_date and len(suggestions) < safe_leave_days:
        if probe >= start_date and probe.weekday() == FRIDAY:
            suggestions.append(_suggestion(
                probe,
                "AI-Optimized Wellness Break",
                "long_weekend",
                1,
                "AI recommends taking Friday off for a 3-day weekend to maximize rest and recovery",
            ))
        probe = add_months(probe, 1)

    if user_type == STUDENT:
        if hints.has_exam_dates:
            suggestions.append(_suggestion(
                today + timedelta(days=POST_EXAM_OFFSET_DAYS),
                "Post-Exam Recovery & Celebration",
                "extended",
                3,
                "AI recommends taking time off after exams for mental recovery and celebration",
            ))
        suggestions.append(_suggestion(
            midpoint(start_date, end_date),
            "Mid-Semester Mental Health Break",
            "extended",
            2,
            "AI-scheduled break to prevent academic burnout and maintain peak performance",
        ))
    else:
        if hints.has_project_deadlines:
            suggestions.append(_suggestion(
                today + timedelta(days=POST_PROJECT_OFFSET_DAYS),
                "Post-Project Decompression",
                "extended",
                3,
                "AI recommends taking time off after major project completion for stress recovery",
            ))
        quarter_break = add_months(start_date, 3)
        if quarter_break is not None and quarter_break <= end_date:
            suggestions.append(_suggestion(
                quarter_break,
                "Quarterly Strategic Break",
                "extended",
                5,
                "AI-optimized week off for quarterly rest, reflection, and strategic planning",
            ))

    suggestions.sort(key=lambda s: s["date"])
    return suggestions[:suggestion_cap(safe_leave_days)]


def _candidate_periods(start_date: date, end_date: date, user_type: str) -> List[Dict[str, Any]]:
    periods = []

    for year in years_spanned(start_date, end_date):
        for window in SEASONAL_WINDOWS:
            anchor = date(year, window["month"], 15)
            if not in_period(anchor, start_date, end_date):
                continue
            half = timedelta(days=window["duration"] // 2)
            periods.append({
                "startDate": anchor - half,
                "endDate": anchor + half,
                "duration": window["duration"],
                "reason": f"{window['name']} Optimal Period",
                "impact": window["impact"],
                "aiScore": window["aiScore"],
                "description": f"AI recommends this period for {window['name']} celebration with maximum benefits",
                "benefits": list(window["benefits"]),
            })

        if user_type != STUDENT:
            for quarter, month in enumerate(QUARTER_END_MONTHS, 1):
                quarter_end = date(year, month, QUARTER_END_DAY)
                if not in_period(quarter_end, start_date, end_date):
                    continue
                periods.append({
                    "startDate": quarter_end,
                    "endDate": quarter_end + timedelta(days=5),
                    "duration": 5,
                    "reason": f"Q{quarter} Break",
                    "impact": "medium",
                    "aiScore": 80,
                    "description": "Strategic quarter-end break for optimal work-life balance",
                    "benefits": ["Quarter completion", "Performance review period", "Strategic planning time", "Reduced workload"],
                })

    if user_type == STUDENT:
        middle = midpoint(start_date, end_date)
        periods.append({
            "startDate": shift_days(middle, -3),
            "endDate": shift_days(middle, 3),
            "duration": 6,
            "reason": "Mid-Semester Wellness Break",
            "impact": "medium",
            "aiScore": 88,
            "description": "AI-optimized break to prevent academic burnout and boost performance",
            "benefits": ["Mental health", "Study break", "Avoid burnout", "Social time"],
        })

    return periods


def generate_optimal_leave_dates(
    start_date: date,
    end_date: date,
    safe_leave_days: int,
    user_type: str,
) -> List[Dict[str, Any]]:
    """Scored leave windows that fit inside the safe leave budget, best first."""
    if safe_leave_days <= 0:
        return []

    fitting = [
        period for period in _candidate_periods(start_date, end_date, user_type)
        if period["duration"] <= safe_leave_days
    ]
    # sorted() is stable, equal scores keep table order
    ranked = sorted(fitting, key=lambda p: p["aiScore"], reverse=True)
    return ranked[:MAX_OPTIMAL_PERIODS]

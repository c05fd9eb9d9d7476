"""
test_leave_suggestions.py: Unit tests for suggested and optimal leave dates.

Calendar facts used below:
  2024-03-15 Friday (Holi + mid-month Friday), 2024-04-15 Monday,
  2024-05-15 Wednesday (Eid), 2025-01-18 Saturday (midpoint of 2025-01-06..31).
"""

from datetime import date, timedelta

from attendance_module.leave_suggestions import (
    generate_optimal_leave_dates,
    generate_suggested_leave_dates,
    suggestion_cap,
)
from attendance_module.planning_hints import PlanningHints

SPRING_START = date(2024, 3, 1)
SPRING_END = date(2024, 5, 31)
NO_HINTS = PlanningHints()
TODAY = date(2024, 2, 1)


class TestSuggestionCap:

    def test_eighty_percent_floor(self):
        assert suggestion_cap(5) == 4
        assert suggestion_cap(1) == 0
        assert suggestion_cap(10) == 8
        assert suggestion_cap(0) == 0


class TestSuggestedLeaveDates:

    def test_no_safe_days_no_suggestions(self):
        assert generate_suggested_leave_dates(SPRING_START, SPRING_END, 0, "student", NO_HINTS, TODAY) == []

    def test_spring_employee(self):
        suggestions = generate_suggested_leave_dates(SPRING_START, SPRING_END, 65, "employee", NO_HINTS, TODAY)
        assert [(s["date"], s["type"], s["reason"]) for s in suggestions] == [
            (date(2024, 3, 15), "long_weekend", "Holi Long Weekend Strategy"),
            (date(2024, 3, 15), "long_weekend", "AI-Optimized Wellness Break"),
            (date(2024, 5, 15), "festival", "Eid Cultural Celebration"),
        ]

    def test_festival_durations_come_from_table(self):
        suggestions = generate_suggested_leave_dates(SPRING_START, SPRING_END, 65, "employee", NO_HINTS, TODAY)
        holi = suggestions[0]
        assert holi["duration"] == 2
        assert "4-day weekend" in holi["description"]

    def test_truncated_to_eighty_percent(self):
        """Two safe days allow a single suggestion; the wellness probe stops early."""
        suggestions = generate_suggested_leave_dates(SPRING_START, SPRING_END, 2, "employee", NO_HINTS, TODAY)
        assert len(suggestions) == 1
        assert suggestions[0]["reason"] == "Holi Long Weekend Strategy"

    def test_student_with_exams(self):
        hints = PlanningHints(exam_dates="Finals in March")
        suggestions = generate_suggested_leave_dates(SPRING_START, SPRING_END, 65, "student", hints, TODAY)
        dates = [s["date"] for s in suggestions]
        assert dates == sorted(dates)
        post_exam = [s for s in suggestions if s["reason"] == "Post-Exam Recovery & Celebration"]
        assert post_exam[0]["date"] == TODAY + timedelta(days=30)
        assert post_exam[0]["type"] == "extended"
        mid = [s for s in suggestions if s["reason"] == "Mid-Semester Mental Health Break"]
        assert mid[0]["date"] == date(2024, 4, 15)
        assert len(suggestions) == 5

    def test_student_without_exams_has_no_post_exam_date(self):
        suggestions = generate_suggested_leave_dates(SPRING_START, SPRING_END, 65, "student", NO_HINTS, TODAY)
        assert not any(s["reason"].startswith("Post-Exam") for s in suggestions)

    def test_post_exam_follows_reference_date(self):
        hints = PlanningHints(exam_dates="soon")
        first = generate_suggested_leave_dates(SPRING_START, SPRING_END, 65, "student", hints, date(2024, 2, 1))
        later = generate_suggested_leave_dates(SPRING_START, SPRING_END, 65, "student", hints, date(2024, 2, 11))
        first_post = next(s for s in first if s["reason"].startswith("Post-Exam"))
        later_post = next(s for s in later if s["reason"].startswith("Post-Exam"))
        assert later_post["date"] - first_post["date"] == timedelta(days=10)

    def test_employee_quarterly_and_post_project(self):
        hints = PlanningHints(project_deadlines="Release 2.0")
        today = date(2025, 1, 10)
        suggestions = generate_suggested_leave_dates(
            date(2025, 1, 6), date(2025, 6, 30), 100, "employee", hints, today
        )
        by_reason = {s["reason"]: s for s in suggestions}
        assert by_reason["Post-Project Decompression"]["date"] == date(2025, 2, 24)
        assert by_reason["Quarterly Strategic Break"]["date"] == date(2025, 4, 6)
        assert by_reason["Quarterly Strategic Break"]["duration"] == 5

    def test_wellness_days_are_fridays_inside_period(self):
        suggestions = generate_suggested_leave_dates(
            date(2024, 3, 16), date(2024, 12, 31), 150, "employee", NO_HINTS, TODAY
        )
        wellness = [s for s in suggestions if s["reason"] == "AI-Optimized Wellness Break"]
        assert wellness
        for s in wellness:
            assert s["date"].day == 15
            assert s["date"].weekday() == 4
            assert s["date"] >= date(2024, 3, 16)

    def test_festivals_scanned_for_every_year(self):
        """A period across New Year picks up festivals from both years."""
        suggestions = generate_suggested_leave_dates(
            date(2024, 12, 1), date(2025, 3, 31), 60, "employee", NO_HINTS, TODAY
        )
        reasons = {s["reason"] for s in suggestions}
        # 2024-12-25 Wednesday, 2025-01-01 Wednesday
        assert "Christmas Cultural Celebration" in reasons
        assert "New Year Cultural Celebration" in reasons

    def test_weekend_festivals_skipped(self):
        """Diwali anchor 2025-11-15 is a Saturday."""
        suggestions = generate_suggested_leave_dates(
            date(2025, 11, 1), date(2025, 11, 30), 20, "student", NO_HINTS, TODAY
        )
        assert not any("Diwali" in s["reason"] for s in suggestions)


class TestOptimalLeaveDates:

    def test_full_year_employee_ranking(self):
        periods = generate_optimal_leave_dates(date(2025, 1, 1), date(2025, 12, 31), 258, "employee")
        assert [p["reason"] for p in periods] == [
            "Christmas & New Year Optimal Period",
            "Diwali Optimal Period",
            "Summer Break Optimal Period",
            "Holi Celebration Optimal Period",
            "Q1 Break",
            "Q2 Break",
            "Q3 Break",
            "Q4 Break",
        ]

    def test_windows_centre_on_the_fifteenth(self):
        periods = generate_optimal_leave_dates(date(2025, 1, 1), date(2025, 12, 31), 258, "employee")
        christmas = periods[0]
        assert christmas["startDate"] == date(2025, 12, 12)
        assert christmas["endDate"] == date(2025, 12, 18)
        assert christmas["aiScore"] == 98
        assert christmas["impact"] == "low"
        q1 = periods[4]
        assert q1["startDate"] == date(2025, 3, 25)
        assert q1["endDate"] == date(2025, 3, 30)

    def test_duration_must_fit_safe_days(self):
        periods = generate_optimal_leave_dates(date(2025, 1, 1), date(2025, 12, 31), 5, "employee")
        assert all(p["duration"] <= 5 for p in periods)
        assert [p["aiScore"] for p in periods] == [95, 85, 80, 80, 80, 80]

    def test_capped_at_ten_and_sorted(self):
        periods = generate_optimal_leave_dates(date(2024, 1, 1), date(2025, 12, 31), 500, "employee")
        assert len(periods) == 10
        scores = [p["aiScore"] for p in periods]
        assert scores == sorted(scores, reverse=True)
        assert periods[0]["startDate"].year == 2024
        assert periods[1]["startDate"].year == 2025

    def test_student_mid_semester_window(self):
        periods = generate_optimal_leave_dates(date(2025, 1, 6), date(2025, 1, 31), 6, "student")
        assert len(periods) == 1
        assert periods[0]["startDate"] == date(2025, 1, 15)
        assert periods[0]["endDate"] == date(2025, 1, 21)
        assert periods[0]["aiScore"] == 88

    def test_student_window_too_long_for_budget(self):
        assert generate_optimal_leave_dates(date(2025, 1, 6), date(2025, 1, 31), 5, "student") == []

    def test_no_safe_days(self):
        assert generate_optimal_leave_dates(date(2025, 1, 1), date(2025, 12, 31), 0, "employee") == []

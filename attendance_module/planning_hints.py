# app/attendance_module/planning_hints.py
from dataclasses import dataclass
from typing import Optional

STUDENT = "student"
EMPLOYEE = "employee"
USER_TYPES = (STUDENT, EMPLOYEE)


@dataclass(frozen=True)
class PlanningHints:
    """
    Optional free-text context sent with an attendance request.

    Only the presence of each field matters; its content is never parsed.

    - institution_type: "university" or "college" adds one student strategy
      recommendation. Any other value is ignored.
    - exam_dates: students get an exam recommendation, an exam warning and a
      post-exam recovery suggestion 30 days after the reference date.
    - project_deadlines: employees get a project recommendation, a project
      warning and a post-project suggestion 45 days after the reference date.
    """
    institution_type: Optional[str] = None
    exam_dates: Optional[str] = None
    project_deadlines: Optional[str] = None

    @property
    def has_exam_dates(self) -> bool:
        return bool(self.exam_dates)

    @property
    def has_project_deadlines(self) -> bool:
        return bool(self.project_deadlines)

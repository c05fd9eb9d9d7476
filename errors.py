# app/errors.py
"""Domain errors shared by the planner modules."""


class PlannerError(Exception):
    """Base class for every error raised by the planner core."""


class InvalidInputError(PlannerError):
    """Raised when a request carries values the calculators cannot work with."""


class HolidayProviderError(PlannerError):
    """Raised when the public holiday API cannot be reached or returns junk."""


class ReportGenerationError(PlannerError):
    """Raised when an export report cannot be built."""

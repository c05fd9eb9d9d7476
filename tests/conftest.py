"""
conftest.py: Shared pytest fixtures for the holiday planner test suite.

No network access is needed: the public holiday API is replaced by an
in-memory provider and the chat assistant runs without an LLM.

Import-path bootstrapping:
    The project root is inserted into sys.path so that the flat top-level
    modules (``config``, ``errors``, ``main``) and the ``*_module`` packages
    resolve regardless of where pytest is invoked.
"""

import sys
import os
from contextlib import nullcontext
from datetime import date

import pytest

_ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _ROOT_DIR not in sys.path:
    sys.path.insert(0, _ROOT_DIR)

from errors import HolidayProviderError  # noqa: E402


class FakeHolidayProvider:
    """
    Stand-in for HolidayProvider.

    holidays_by_year maps a year to the raw Nager.Date style entries
    (``{"date": "2025-01-27", "name": "...", "global": True}``). Years listed
    in failing_years raise HolidayProviderError, as a network failure would.
    """

    def __init__(self, holidays_by_year=None, failing_years=()):
        self.holidays_by_year = holidays_by_year or {}
        self.failing_years = set(failing_years)
        self.calls = []

    def client(self):
        return nullcontext()

    def fetch_year(self, year, country, client=None):
        self.calls.append((year, country))
        if year in self.failing_years:
            raise HolidayProviderError(f"simulated outage for {year}")
        return list(self.holidays_by_year.get(year, []))


class DownHolidayProvider(FakeHolidayProvider):
    """Every request fails."""

    def fetch_year(self, year, country, client=None):
        self.calls.append((year, country))
        raise HolidayProviderError("simulated outage")


@pytest.fixture
def reference_date():
    """Pinned 'today' so now-relative suggestions are reproducible."""
    return date(2025, 1, 10)


@pytest.fixture
def january_2025_provider():
    """Live provider answering with a single Monday holiday on 2025-01-27."""
    return FakeHolidayProvider({
        2025: [{"date": "2025-01-27", "name": "Founders Day", "global": True}],
    })


@pytest.fixture
def down_provider():
    return DownHolidayProvider()


@pytest.fixture
def client(monkeypatch, january_2025_provider):
    """
    FastAPI TestClient with the holiday API and LLM swapped out.
    """
    from fastapi.testclient import TestClient
    from assistant_module import routes as assistant_routes
    from assistant_module.chat_agent import ChatAssistant
    from calendar_module import routes as calendar_routes
    from main import app

    monkeypatch.setattr(calendar_routes, "holiday_provider", january_2025_provider)
    monkeypatch.setattr(assistant_routes, "chat_assistant", ChatAssistant(llm=None))
    return TestClient(app)

"""
test_api.py: End-to-end tests for the HTTP API via FastAPI's TestClient.

The holiday API is replaced by the january_2025_provider fixture and the
chat assistant runs without an LLM (see conftest.client).
"""

import pytest

JANUARY = {"startDate": "2025-01-06", "endDate": "2025-01-31"}


class TestRoot:

    def test_welcome(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "Welcome to the AI Holiday Planner API!", "api_docs": "/docs"}


class TestCalculate:

    def test_calculation(self, client):
        response = client.post("/attendance/calculate", json={
            **JANUARY, "attendanceRule": 75, "userType": "employee", "projectDeadlines": "Feb 15 release",
        })
        assert response.status_code == 200
        body = response.json()
        assert body["totalDays"] == 20
        assert body["requiredDays"] == 15
        assert body["safeLeaveDays"] == 5
        assert body["isAtRisk"] is False
        assert body["projectedAttendancePercentage"] == 75
        assert any("Project Alert" in w for w in body["warnings"])
        assert len(body["suggestedLeaveDates"]) <= 4
        assert all(p["duration"] <= 5 for p in body["optimalLeaveDates"])

    def test_reversed_period(self, client):
        response = client.post("/attendance/calculate", json={
            "startDate": "2025-01-31", "endDate": "2025-01-06", "attendanceRule": 75, "userType": "student",
        })
        assert response.status_code == 422
        assert "Invalid date range" in response.json()["detail"]

    def test_period_ending_on_last_representable_day(self, client):
        response = client.post("/attendance/calculate", json={
            "startDate": "9999-12-01", "endDate": "9999-12-31", "attendanceRule": 75, "userType": "student",
        })
        assert response.status_code == 200
        assert response.json()["totalDays"] == 23

    def test_rule_out_of_range(self, client):
        response = client.post("/attendance/calculate", json={**JANUARY, "attendanceRule": 0, "userType": "student"})
        assert response.status_code == 422

    def test_unknown_user_type(self, client):
        response = client.post("/attendance/calculate", json={**JANUARY, "attendanceRule": 75, "userType": "contractor"})
        assert response.status_code == 422


class TestPublicHolidays:

    def test_live_holidays(self, client):
        response = client.post("/calendar/public-holidays", json={"startDate": "2025-01-01", "endDate": "2025-01-31"})
        assert response.status_code == 200
        body = response.json()
        assert body["source"] == "live"
        assert [h["date"] for h in body["holidays"]] == ["2025-01-27"]
        assert body["suggestedLongWeekends"][0]["startDate"] == "2025-01-24"
        assert len(body["weekends"]) == 8

    def test_fallback(self, client, monkeypatch, down_provider):
        from calendar_module import routes as calendar_routes

        monkeypatch.setattr(calendar_routes, "holiday_provider", down_provider)
        response = client.post("/calendar/public-holidays", json={
            "startDate": "2025-01-01", "endDate": "2025-01-31", "country": "us",
        })
        body = response.json()
        assert body["source"] == "fallback"
        assert [h["name"] for h in body["holidays"]] == ["New Year's Day", "Martin Luther King Jr. Day"]
        assert down_provider.calls == [(2025, "US")]

    @pytest.mark.parametrize("country", ["..", "I1", "IND", "/x"])
    def test_country_must_be_two_letters(self, client, country):
        response = client.post("/calendar/public-holidays", json={
            "startDate": "2025-01-01", "endDate": "2025-01-31", "country": country,
        })
        assert response.status_code == 422

    def test_too_many_years(self, client):
        response = client.post("/calendar/public-holidays", json={"startDate": "1900-01-01", "endDate": "2100-12-31"})
        assert response.status_code == 422
        assert "calendar years" in response.json()["detail"]

    def test_reversed_period(self, client):
        response = client.post("/calendar/public-holidays", json={"startDate": "2025-02-01", "endDate": "2025-01-01"})
        assert response.status_code == 422


class TestCalendarIntegration:

    ATTENDANCE = {**JANUARY, "totalDays": 20, "requiredDays": 15, "safeLeaveDays": 5, "attendanceRule": 75}

    def test_integrate(self, client):
        response = client.post("/calendar/integrate", json={
            "email": "a@b.com", "provider": "google", "attendanceData": self.ATTENDANCE,
        })
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "error"
        assert body["integrationId"].startswith("google_a@b.com_")

    def test_unknown_provider(self, client):
        response = client.post("/calendar/integrate", json={
            "email": "a@b.com", "provider": "yahoo", "attendanceData": self.ATTENDANCE,
        })
        assert response.status_code == 422

    def test_sync(self, client):
        events = [
            {"id": "1", "title": "A", "date": "2025-01-06", "type": "attendance"},
            {"id": "2", "title": "B", "date": "2025-01-26", "type": "public_holiday"},
            {"id": "3", "title": "C", "date": "2025-01-18", "type": "reminder"},
        ]
        response = client.post("/calendar/sync", json={"integrationId": "google_a@b.com_1", "events": events})
        assert response.json()["syncedEvents"] == 2

    def test_generate_events(self, client):
        response = client.post("/calendar/generate-events", json={"email": "a@b.com", "attendanceData": self.ATTENDANCE})
        events = response.json()["events"]
        assert len(events) == 22
        assert events[-1] == {
            "id": "warning_22",
            "title": "Attendance Risk Warning",
            "date": "2025-01-24",
            "type": "reminder",
            "description": "⚠️ Limited safe days remaining (5). Plan carefully!",
        }


class TestChat:

    def test_rule_based_chat(self, client):
        response = client.post("/ai/chat", json={
            "message": "Am I at risk?",
            "userType": "student",
            "attendanceData": {"totalDays": 20, "requiredDays": 20, "safeLeaveDays": 0, "attendanceRule": 100},
        })
        assert response.status_code == 200
        body = response.json()
        assert "High Risk Alert" in body["response"]
        assert body["suggestions"]

    def test_chat_without_data(self, client):
        response = client.post("/ai/chat", json={"message": "hi", "userType": "employee"})
        assert "Assistant Ready" in response.json()["response"]


class TestExport:

    REQUEST = {
        "attendanceData": {
            "totalDays": 20, "requiredDays": 15, "safeLeaveDays": 5, "attendanceRule": 75,
            "recommendations": ["Plan ahead"], "warnings": [],
        },
        "userInfo": {"userType": "student", **JANUARY},
    }

    def test_pdf(self, client):
        response = client.post("/export/generate", json={**self.REQUEST, "format": "pdf"})
        assert response.status_code == 200
        body = response.json()
        assert body["filename"].startswith("ai-holiday-planner-student-")
        assert body["filename"].endswith(".pdf")
        assert body["fileContent"].startswith("<!DOCTYPE html>")

    def test_excel(self, client):
        response = client.post("/export/generate", json={**self.REQUEST, "format": "excel"})
        assert response.json()["filename"].endswith(".csv")
        assert "Plan ahead" in response.json()["fileContent"]

    def test_unknown_format(self, client):
        response = client.post("/export/generate", json={**self.REQUEST, "format": "docx"})
        assert response.status_code == 422

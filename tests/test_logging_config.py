"""
test_logging_config.py: Tests for the JSON log formatter and setup.
"""

import json
import logging

from logging_config import PlannerJSONFormatter, setup_logging


def make_record(**extra):
    record = logging.LogRecord(
        name="holiday-planner.holidays",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg="Failed to fetch holidays for year %s",
        args=(2025,),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestPlannerJSONFormatter:

    def test_holiday_context_fields(self):
        entry = json.loads(PlannerJSONFormatter().format(make_record(country="IN", year=2025, source="live")))
        assert entry["message"] == "Failed to fetch holidays for year 2025"
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "holiday-planner.holidays"
        assert (entry["country"], entry["year"], entry["source"]) == ("IN", 2025, "live")
        assert "user_type" not in entry

    def test_plain_record_has_no_context(self):
        entry = json.loads(PlannerJSONFormatter().format(make_record()))
        assert not {"country", "year", "source", "user_type"} & entry.keys()

    def test_non_ascii_kept(self):
        record = make_record(user_type="student")
        record.msg, record.args = "⚠️ High Risk Zone", ()
        entry = json.loads(PlannerJSONFormatter().format(record))
        assert entry["message"] == "⚠️ High Risk Zone"
        assert entry["user_type"] == "student"


class TestSetupLogging:

    def test_text_output(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging(level="debug", json_output=False)
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert not isinstance(root.handlers[0].formatter, PlannerJSONFormatter)
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            root.handlers, root.level = saved_handlers, saved_level

    def test_json_output(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging()
            assert isinstance(root.handlers[0].formatter, PlannerJSONFormatter)
        finally:
            root.handlers, root.level = saved_handlers, saved_level

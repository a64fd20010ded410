"""Tests for structured log formatting and trace ids."""
import json
import logging

from observability.logging import (
    ConsoleFormatter,
    JSONFormatter,
    LogContext,
    TraceIdFilter,
    clear_trace_id,
    get_trace_id,
    set_trace_id,
)


def _record(msg="Equipment search", level=logging.INFO, **extra):
    record = logging.LogRecord("marketplace_api.routers.equipment_search", level, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    TraceIdFilter().filter(record)
    return record


def test_json_includes_trace_id_and_extras():
    with LogContext(trace_id="abc123"):
        line = JSONFormatter(service_name="api").format(_record(result_count=12, location="chennai"))

    entry = json.loads(line)
    assert entry["service"] == "api"
    assert entry["message"] == "Equipment search"
    assert entry["trace_id"] == "abc123"
    assert entry["result_count"] == 12
    assert entry["location"] == "chennai"


def test_json_extras_cannot_override_standard_fields():
    entry = json.loads(JSONFormatter("api").format(_record(service="spoofed")))
    assert entry["service"] == "api"


def test_json_errors_carry_source_location():
    entry = json.loads(JSONFormatter("api").format(_record(level=logging.ERROR)))
    assert entry["source_location"].startswith(__file__)


def test_console_format():
    with LogContext(trace_id="0123456789abcdef"):
        line = ConsoleFormatter("api", use_colors=False).format(_record(alias_count=3))
    assert line == "[INFO] api/equipment_search [01234567]: Equipment search {alias_count=3}"


def test_log_context_restores_previous_trace_id():
    set_trace_id("outer")
    try:
        with LogContext(trace_id="inner"):
            assert get_trace_id() == "inner"
        assert get_trace_id() == "outer"
    finally:
        clear_trace_id()
    assert get_trace_id() is None

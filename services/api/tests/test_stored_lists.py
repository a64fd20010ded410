"""Tests for stored JSON URL list parsing."""
import logging

import pytest

from marketplace_api.utils.stored_lists import StoredListState, StoredUrlList, load_url_list


@pytest.mark.parametrize("raw", [None, "", "   ", b""])
def test_absent_values(raw):
    parsed = StoredUrlList.parse(raw)
    assert parsed.state is StoredListState.ABSENT
    assert parsed.to_list() == []


@pytest.mark.parametrize("raw", [
    "not json",
    "{\"url\": \"a.jpg\"}",
    "\"a.jpg\"",
    "[1, 2]",
    "[\"a.jpg\", null]",
    b"\xff\xfe",
    42,
])
def test_malformed_values(raw):
    parsed = StoredUrlList.parse(raw)
    assert parsed.state is StoredListState.MALFORMED
    assert parsed.error
    assert parsed.to_list() == []


@pytest.mark.parametrize("raw", [
    "[\"/uploads/a.jpg\", \"/uploads/b.jpg\"]",
    b"[\"/uploads/a.jpg\", \"/uploads/b.jpg\"]",
    ["/uploads/a.jpg", "/uploads/b.jpg"],
])
def test_valid_values(raw):
    parsed = StoredUrlList.parse(raw)
    assert parsed.state is StoredListState.VALID
    assert parsed.to_list() == ["/uploads/a.jpg", "/uploads/b.jpg"]


def test_empty_json_list_is_valid():
    assert StoredUrlList.parse("[]").state is StoredListState.VALID


def test_load_url_list_logs_malformed(caplog):
    with caplog.at_level(logging.WARNING):
        assert load_url_list("[broken", record_id=7, field="equipment_images") == []

    record = next(r for r in caplog.records if "Malformed stored URL list" in r.getMessage())
    assert record.record_id == 7
    assert record.field == "equipment_images"


def test_load_url_list_is_quiet_for_absent(caplog):
    with caplog.at_level(logging.WARNING):
        assert load_url_list(None, record_id=1) == []
    assert not caplog.records

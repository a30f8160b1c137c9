"""Unit tests for logger helpers."""

import pytest

from logger import _build_context, format_details, get_logger


@pytest.mark.unit
class TestLogger:
    """Tests for context zone and detail formatting."""

    def test_context_from_bound_fields(self):
        record = {"extra": {"module": "m", "storage": "uploads/cache", "file_id": "a/b.jpg"}}

        assert _build_context(record) == "Storage=uploads/cache • File=a/b.jpg"

    def test_context_skips_unbound_fields(self):
        record = {"extra": {"module": "m", "storage": "uploads/cache", "file_id": None}}

        assert _build_context(record) == "Storage=uploads/cache"

    def test_bound_storage_logger_records_context(self):
        messages = []
        log = get_logger("tests").bind(storage="uploads/store", file_id="x.txt")
        sink_id = log.add(lambda message: messages.append(message.record["extra"]), level="DEBUG")
        try:
            log.debug("Stored file")
        finally:
            log.remove(sink_id)

        assert _build_context({"extra": messages[0]}) == "Storage=uploads/store • File=x.txt"

    def test_format_details(self):
        assert format_details(source="/tmp/x", destination="/srv/x") == "source=/tmp/x • destination=/srv/x"
        assert format_details() == ""

"""
Unit tests for structured logging formatters
"""
import json
import logging

from jobcost.logging_config import AuditFormatter, JSONFormatter, TextFormatter, get_client_ip


def _record(msg="Skipping malformed log entry", level=logging.WARNING, **extra):
    record = logging.LogRecord(
        name="jobcost.services.log_entries",
        level=level,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test JSON log output"""

    def test_includes_extra_fields(self):
        """Test fields passed through extra= land in the JSON"""
        output = json.loads(JSONFormatter().format(_record(category="print", index=4)))

        assert output["level"] == "WARNING"
        assert output["logger"] == "jobcost.services.log_entries"
        assert output["message"] == "Skipping malformed log entry"
        assert output["category"] == "print"
        assert output["index"] == 4
        assert "location" not in output

    def test_non_serializable_extra_stringified(self):
        """Test objects json cannot encode are logged as strings"""
        output = json.loads(JSONFormatter().format(_record(value={1, 2})))

        assert isinstance(output["value"], str)

    def test_errors_include_location(self):
        """Test ERROR records carry file and line"""
        output = json.loads(JSONFormatter().format(_record(level=logging.ERROR)))

        assert output["location"]["line"] == 10


class TestTextFormatter:
    """Test human-readable log output"""

    def test_extras_appended(self):
        """Test extras are appended as key=value"""
        output = TextFormatter().format(_record(material="Cast Vinyl"))

        assert "[WARNING] jobcost.services.log_entries: Skipping malformed log entry" in output
        assert "material=Cast Vinyl" in output


class TestAuditFormatter:
    """Test audit log output"""

    def test_drops_empty_fields(self):
        """Test unset audit fields are omitted"""
        record = _record(
            msg="REPORT_GENERATED",
            level=logging.INFO,
            event="REPORT_GENERATED",
            resource_type="profit_loss",
            resource_id=None,
            details={"items_counted": {"print": 2}},
            ip_address=None,
        )

        output = json.loads(AuditFormatter().format(record))

        assert output["event"] == "REPORT_GENERATED"
        assert output["resource_type"] == "profit_loss"
        assert output["details"] == {"items_counted": {"print": 2}}
        assert "resource_id" not in output
        assert "ip_address" not in output


class _FakeClient:
    host = "10.0.0.5"


class _FakeRequest:
    def __init__(self, headers=None, client=None):
        self.headers = headers or {}
        self.client = client


class TestGetClientIp:
    """Test client IP extraction behind proxies"""

    def test_forwarded_for_first_hop(self):
        request = _FakeRequest(headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"})

        assert get_client_ip(request) == "203.0.113.7"

    def test_real_ip_header(self):
        request = _FakeRequest(headers={"X-Real-IP": "203.0.113.9"})

        assert get_client_ip(request) == "203.0.113.9"

    def test_falls_back_to_client(self):
        assert get_client_ip(_FakeRequest(client=_FakeClient())) == "10.0.0.5"
        assert get_client_ip(_FakeRequest()) is None

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from apidata_store.data_models import SessionState, TransactionRecord
from apidata_store.errors import ApiDataValidationError


class TestTransactionRecord:
    def test_from_mapping_accepts_wire_keys(self):
        record = TransactionRecord.from_mapping(
            {
                "RequestUri": "/kcsapi/api_port/port",
                "StatusCode": "200",
                "HttpDate": "Sun, 10 Mar 2024 03:00:00 GMT",
                "LocalTime": "2024-03-10T12:00:00+09:00",
                "RequestBody": "api_verno=1",
                "ResponseBody": "svdata={}",
            }
        )

        assert record == TransactionRecord(
            request_uri="/kcsapi/api_port/port",
            status_code=200,
            http_date="Sun, 10 Mar 2024 03:00:00 GMT",
            local_time="2024-03-10T12:00:00+09:00",
            request_body="api_verno=1",
            response_body="svdata={}",
        )

    def test_from_mapping_accepts_snake_case_keys(self):
        record = TransactionRecord.from_mapping({"request_uri": "/a", "status_code": 404})

        assert record.request_uri == "/a"
        assert record.status_code == 404
        assert record.response_body is None

    @pytest.mark.parametrize("raw", [None, ""])
    def test_blank_status_code_becomes_none(self, raw):
        assert TransactionRecord.from_mapping({"RequestUri": "/a", "StatusCode": raw}).status_code is None

    @pytest.mark.parametrize("raw", ["OK", True, 2.5j])
    def test_invalid_status_code_rejected(self, raw):
        with pytest.raises(ApiDataValidationError, match="status_code"):
            TransactionRecord.from_mapping({"RequestUri": "/a", "StatusCode": raw})

    def test_missing_request_uri_rejected(self):
        with pytest.raises(ApiDataValidationError, match="RequestUri"):
            TransactionRecord.from_mapping({"StatusCode": 200})

    def test_request_uri_must_be_string(self):
        with pytest.raises(ApiDataValidationError):
            TransactionRecord(request_uri=42)

    def test_bool_status_code_rejected_on_construction(self):
        with pytest.raises(ApiDataValidationError):
            TransactionRecord(request_uri="/a", status_code=True)

    def test_contains_marker(self):
        record = TransactionRecord(request_uri="/kcsapi/api_port/port")

        assert record.contains_marker("api_port/port") is True
        assert record.contains_marker("api_start2") is False


class TestSessionState:
    def test_is_stale_is_strict(self):
        cutoff = datetime(2024, 3, 9, 20, 0, tzinfo=timezone.utc)
        state = SessionState("s", "a.log", cutoff)

        assert state.is_stale(cutoff) is False
        assert SessionState("s", "a.log", datetime(2024, 3, 9, 19, 59, tzinfo=timezone.utc)).is_stale(cutoff) is True

    def test_requires_segment_name(self):
        with pytest.raises(ValueError):
            SessionState("s", "", datetime(2024, 3, 9, tzinfo=timezone.utc))

    def test_requires_aware_timestamp(self):
        with pytest.raises(ValueError):
            SessionState("s", "a.log", datetime(2024, 3, 9))

"""
Captured HTTP transaction record.

Agents post records with PascalCase keys (``RequestUri``, ``StatusCode``...);
``TransactionRecord.from_mapping`` also accepts the snake_case field names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..errors import ApiDataValidationError

_WIRE_KEYS = {
    "request_uri": "RequestUri",
    "status_code": "StatusCode",
    "http_date": "HttpDate",
    "local_time": "LocalTime",
    "request_body": "RequestBody",
    "response_body": "ResponseBody",
}


@dataclass(frozen=True)
class TransactionRecord:
    """One HTTP request/response pair observed by an agent."""

    request_uri: str
    status_code: Optional[int] = None
    http_date: Optional[str] = None
    local_time: Optional[str] = None
    request_body: Optional[str] = None
    response_body: Optional[str] = None

    def __post_init__(self) -> None:
        if self.request_uri is None:
            raise ApiDataValidationError.missing_field("request_uri")
        if not isinstance(self.request_uri, str):
            raise ApiDataValidationError.invalid_field("request_uri", self.request_uri)
        if self.status_code is not None and (
            isinstance(self.status_code, bool) or not isinstance(self.status_code, int)
        ):
            raise ApiDataValidationError.invalid_field("status_code", self.status_code)

    def contains_marker(self, marker: str) -> bool:
        """Return True when ``marker`` occurs in the request URI."""
        return marker in self.request_uri

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "TransactionRecord":
        values = {field: _lookup(payload, field) for field in _WIRE_KEYS}
        if values["request_uri"] is None:
            raise ApiDataValidationError.missing_field(_WIRE_KEYS["request_uri"])
        values["status_code"] = _coerce_status_code(values["status_code"])
        return cls(**values)


def _lookup(payload: Mapping[str, Any], field: str) -> Any:
    wire_key = _WIRE_KEYS[field]
    if wire_key in payload:
        return payload[wire_key]
    return payload.get(field)


def _coerce_status_code(raw: Any) -> Optional[int]:
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise ApiDataValidationError.invalid_field("status_code", raw)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ApiDataValidationError.invalid_field("status_code", raw) from exc


__all__ = ["TransactionRecord"]

"""Common error types used across the codebase."""

from __future__ import annotations


class ApiDataValidationError(ValueError):
    """Raised when a write request or record payload is malformed."""

    @classmethod
    def missing_argument(cls, name: str) -> "ApiDataValidationError":
        return cls(f"{name} must not be None")

    @classmethod
    def missing_field(cls, field_name: str) -> "ApiDataValidationError":
        return cls(f"API data record is missing required field {field_name!r}")

    @classmethod
    def invalid_field(cls, field_name: str, value: object) -> "ApiDataValidationError":
        return cls(f"API data record field {field_name!r} has invalid value {value!r}")

    @classmethod
    def invalid_record(cls, index: int, value: object) -> "ApiDataValidationError":
        return cls(f"records[{index}] must be a TransactionRecord, got {type(value).__name__}")

    @classmethod
    def unsafe_segment_name(cls, segment_name: str) -> "ApiDataValidationError":
        return cls(f"Segment name {segment_name!r} escapes the segment root")


class SessionStateDecodeError(ValueError):
    """Raised when a stored session state cannot be decoded."""

    def __init__(self, session_id: str, *, reason: str) -> None:
        super().__init__(f"Stored session state for {session_id!r} is invalid: {reason}")
        self.session_id = session_id
        self.reason = reason


__all__ = ["ApiDataValidationError", "SessionStateDecodeError"]

"""TSV line encoding of captured transactions."""

from __future__ import annotations

from typing import Iterable, Optional

from ..constants import TSV_FIELD_SEPARATOR
from ..data_models import TransactionRecord

_NEWLINE_STRIP_TABLE = str.maketrans("", "", "\r\n")


def strip_newlines(value: Optional[str]) -> str:
    """Drop CR and LF characters; ``None`` becomes the empty string."""
    if value is None:
        return ""
    return value.translate(_NEWLINE_STRIP_TABLE)


def serialize_record(agent_id: str, session_id: str, record: TransactionRecord) -> str:
    """
    Render one record as a single TSV line without terminator.

    Column order: agent id, session id, request URI, status code, HTTP date,
    local time, request body, response body. Tabs inside fields are written
    as-is.
    """
    columns = (
        agent_id,
        session_id,
        record.request_uri,
        str(record.status_code) if record.status_code is not None else None,
        record.http_date,
        record.local_time,
        record.request_body,
        record.response_body,
    )
    return TSV_FIELD_SEPARATOR.join(strip_newlines(column) for column in columns)


def serialize_batch(
    agent_id: str,
    session_id: str,
    records: Iterable[TransactionRecord],
    line_terminator: str,
) -> str:
    """Concatenate the terminated lines of ``records`` in input order."""
    return "".join(serialize_record(agent_id, session_id, record) + line_terminator for record in records)


__all__ = ["serialize_batch", "serialize_record", "strip_newlines"]

"""Deterministic segment names."""

from __future__ import annotations

from datetime import datetime

from ..config import RotationSettings
from ..time_helpers import local_date


def generate_segment_name(timestamp: datetime, session_id: str, *, settings: RotationSettings) -> str:
    """
    Build the segment name for ``session_id`` created at ``timestamp``.

    The date part is the calendar date of ``timestamp`` in the rotation zone,
    so a session's segments sort by day.
    """
    day = local_date(timestamp, utc_offset=settings.utc_offset)
    return settings.segment_name_format.format(
        date=day.strftime(settings.segment_date_format),
        session_id=session_id.lower(),
    )


__all__ = ["generate_segment_name"]

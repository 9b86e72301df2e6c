from __future__ import annotations

from datetime import datetime, timedelta, timezone

from apidata_store.config import RotationSettings
from apidata_store.segments import generate_segment_name
from tests.helpers.segment_fakes import NOW, TODAY_SEGMENT


def test_default_name_uses_local_date_and_lower_cased_session():
    assert generate_segment_name(NOW, "SESS1", settings=RotationSettings()) == TODAY_SEGMENT


def test_name_before_rotation_time_uses_local_calendar_date():
    # 03:00 local on 2024-03-10, before the 05:00 rotation time
    timestamp = datetime(2024, 3, 9, 18, 0, tzinfo=timezone.utc)

    assert generate_segment_name(timestamp, "sess1", settings=RotationSettings()) == "2024-03-10/sess1.log"


def test_name_follows_rotation_zone_not_utc():
    # 00:00 local on 2024-03-10 is still 2024-03-09 in UTC
    settings = RotationSettings()

    assert generate_segment_name(datetime(2024, 3, 9, 14, 59, tzinfo=timezone.utc), "s", settings=settings) == "2024-03-09/s.log"
    assert generate_segment_name(datetime(2024, 3, 9, 15, 0, tzinfo=timezone.utc), "s", settings=settings) == "2024-03-10/s.log"


def test_name_is_deterministic():
    settings = RotationSettings()

    assert generate_segment_name(NOW, "abc", settings=settings) == generate_segment_name(NOW, "abc", settings=settings)


def test_custom_format_and_clock():
    settings = RotationSettings(
        utc_offset=timedelta(hours=-5),
        rotation_time=timedelta(0),
        segment_name_format="{session_id}-{date}.tsv",
        segment_date_format="%Y%m%d",
    )

    assert generate_segment_name(NOW, "Sess1", settings=settings) == "sess1-20240309.tsv"


def test_names_differ_across_one_rotation():
    settings = RotationSettings()
    stale = datetime(2024, 3, 9, 10, 0, tzinfo=timezone.utc)

    assert generate_segment_name(stale, "sess1", settings=settings) != generate_segment_name(NOW, "sess1", settings=settings)

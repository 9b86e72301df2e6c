"""Session rotation and write routing."""

from .api_data_writer import ApiDataWriter
from .session_guard import SessionLockRegistry
from .write_plan import SegmentWrite, WritePlan, build_write_plan, is_rotation_needed
from .writer_factory import create_api_data_writer, create_segment_store

__all__ = [
    "ApiDataWriter",
    "SegmentWrite",
    "SessionLockRegistry",
    "WritePlan",
    "build_write_plan",
    "create_api_data_writer",
    "create_segment_store",
    "is_rotation_needed",
]

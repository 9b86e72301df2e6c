"""Log segment naming, encoding and storage backends."""

from .marker_split import MarkerSplit, find_first_marker_index, split_at_marker
from .naming import generate_segment_name
from .serializer import serialize_batch, serialize_record, strip_newlines
from .store import SegmentStore, append_to_segment

__all__ = [
    "MarkerSplit",
    "SegmentStore",
    "append_to_segment",
    "find_first_marker_index",
    "generate_segment_name",
    "serialize_batch",
    "serialize_record",
    "split_at_marker",
    "strip_newlines",
]

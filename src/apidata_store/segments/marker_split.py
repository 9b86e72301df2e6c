"""Splitting a batch at the first marker record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..data_models import TransactionRecord


@dataclass(frozen=True)
class MarkerSplit:
    """
    Result of splitting a batch at the first marker record.

    ``before_marker`` ends with the marker record and ``from_marker`` starts
    with it, so the marker is present in both halves.
    """

    split_index: Optional[int]
    before_marker: Tuple[TransactionRecord, ...]
    from_marker: Tuple[TransactionRecord, ...]

    @property
    def has_marker(self) -> bool:
        return self.split_index is not None


def find_first_marker_index(records: Sequence[TransactionRecord], marker: str) -> Optional[int]:
    """Return the index of the first record whose URI contains ``marker``."""
    for index, record in enumerate(records):
        if record.contains_marker(marker):
            return index
    return None


def split_at_marker(records: Sequence[TransactionRecord], marker: str) -> MarkerSplit:
    batch = tuple(records)
    split_index = find_first_marker_index(batch, marker)
    if split_index is None:
        return MarkerSplit(split_index=None, before_marker=batch, from_marker=())
    return MarkerSplit(
        split_index=split_index,
        before_marker=batch[: split_index + 1],
        from_marker=batch[split_index:],
    )


__all__ = ["MarkerSplit", "find_first_marker_index", "split_at_marker"]

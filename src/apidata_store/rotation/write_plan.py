"""
Routing decision for one write call.

``build_write_plan`` is pure: it looks at the stored session state, the batch
and the clock and returns the ordered segment writes the engine must perform.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Sequence, Tuple

from ..data_models import SessionState, TransactionRecord
from ..segments import split_at_marker

SegmentNamer = Callable[[datetime, str], str]


@dataclass(frozen=True)
class SegmentWrite:
    """
    One step of a plan: append ``records`` to ``segment_name``.

    When ``new_state`` is set the session index is replaced with it before
    the append.
    """

    segment_name: str
    records: Tuple[TransactionRecord, ...]
    new_state: Optional[SessionState] = None

    @property
    def starts_segment(self) -> bool:
        return self.new_state is not None


@dataclass(frozen=True)
class WritePlan:
    rotation_needed: bool
    steps: Tuple[SegmentWrite, ...]
    split_index: Optional[int] = None

    @property
    def final_state_change(self) -> Optional[SessionState]:
        """The session state the plan leaves in the index, if it changes it."""
        for step in reversed(self.steps):
            if step.new_state is not None:
                return step.new_state
        return None


def is_rotation_needed(existing: Optional[SessionState], cutoff: datetime) -> bool:
    """A stored segment created before ``cutoff`` must not receive new traffic."""
    return existing is not None and existing.is_stale(cutoff)


def build_write_plan(
    session_id: str,
    existing: Optional[SessionState],
    records: Sequence[TransactionRecord],
    *,
    now: datetime,
    cutoff: datetime,
    split_marker: str,
    name_for: SegmentNamer,
) -> WritePlan:
    """
    Decide which segments receive ``records``.

    - No stored state: a new segment is started and takes the whole batch.
    - Stored state inside the window: the whole batch goes to its segment.
    - Stored state older than ``cutoff``: records up to and including the
      first marker stay on the old segment; records from the marker onward
      go to a new segment. Without a marker nothing rotates.
    """
    batch = tuple(records)

    if existing is None:
        state = _fresh_state(session_id, now, name_for)
        return WritePlan(
            rotation_needed=False,
            steps=(SegmentWrite(state.segment_name, batch, new_state=state),),
        )

    if not is_rotation_needed(existing, cutoff):
        return WritePlan(rotation_needed=False, steps=(SegmentWrite(existing.segment_name, batch),))

    split = split_at_marker(batch, split_marker)
    steps = []
    if split.before_marker:
        steps.append(SegmentWrite(existing.segment_name, split.before_marker))
    if split.from_marker:
        state = _fresh_state(session_id, now, name_for)
        steps.append(SegmentWrite(state.segment_name, split.from_marker, new_state=state))
    return WritePlan(rotation_needed=True, steps=tuple(steps), split_index=split.split_index)


def _fresh_state(session_id: str, now: datetime, name_for: SegmentNamer) -> SessionState:
    return SessionState(session_id=session_id, segment_name=name_for(now, session_id), segment_created=now)


__all__ = [
    "SegmentNamer",
    "SegmentWrite",
    "WritePlan",
    "build_write_plan",
    "is_rotation_needed",
]

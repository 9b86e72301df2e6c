"""
Session-rotating writer for captured API data.

Records are appended to the session's current segment. Once the segment is
older than the daily cutoff, the first marker record in a batch starts a new
segment and the session index is repointed at it.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable, Optional

from ..config import RotationSettings
from ..data_models import TransactionRecord
from ..errors import ApiDataValidationError
from ..segments import SegmentStore, append_to_segment, generate_segment_name, serialize_batch
from ..session_index import SessionIndex
from ..time_helpers import get_current_utc, rotation_cutoff, to_utc
from .session_guard import SessionLockRegistry
from .write_plan import SegmentWrite, WritePlan, build_write_plan

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class ApiDataWriter:
    """
    Appends API data batches to per-session log segments.

    The writer keeps no state between calls. Steps of one call are executed
    in order without rollback; a failure leaves earlier steps applied and is
    re-raised unchanged.
    """

    def __init__(
        self,
        session_index: SessionIndex,
        segment_store: SegmentStore,
        settings: Optional[RotationSettings] = None,
        *,
        clock: Clock = get_current_utc,
        lock_registry: Optional[SessionLockRegistry] = None,
    ) -> None:
        if session_index is None:
            raise ApiDataValidationError.missing_argument("session_index")
        if segment_store is None:
            raise ApiDataValidationError.missing_argument("segment_store")
        self.session_index = session_index
        self.segment_store = segment_store
        self.settings = settings or RotationSettings()
        self._clock = clock
        if lock_registry is None and self.settings.serialize_per_session:
            lock_registry = SessionLockRegistry()
        self._lock_registry = lock_registry

    async def write_one(self, agent_id: str, session_id: str, record: TransactionRecord) -> WritePlan:
        """Write a single record."""
        if record is None:
            raise ApiDataValidationError.missing_argument("record")
        return await self.write(agent_id, session_id, (record,))

    async def write(self, agent_id: str, session_id: str, records: Iterable[TransactionRecord]) -> WritePlan:
        """
        Append ``records`` for ``session_id`` and return the executed plan.

        Raises:
            ApiDataValidationError: If an argument is missing or a record has the wrong type
        """
        if records is None:
            raise ApiDataValidationError.missing_argument("records")
        if agent_id is None:
            raise ApiDataValidationError.missing_argument("agent_id")
        if session_id is None:
            raise ApiDataValidationError.missing_argument("session_id")
        batch = tuple(records)
        for index, record in enumerate(batch):
            if not isinstance(record, TransactionRecord):
                raise ApiDataValidationError.invalid_record(index, record)

        await self.segment_store.ensure_container_exists()
        await self.session_index.ensure_exists()

        if self._lock_registry is None:
            return await self._route(agent_id, session_id, batch)
        async with self._lock_registry.hold(session_id):
            return await self._route(agent_id, session_id, batch)

    async def close(self) -> None:
        await self.segment_store.close()
        await self.session_index.close()

    async def __aenter__(self) -> "ApiDataWriter":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def segment_name_for(self, timestamp: datetime, session_id: str) -> str:
        return generate_segment_name(timestamp, session_id, settings=self.settings)

    async def _route(self, agent_id: str, session_id: str, batch: tuple[TransactionRecord, ...]) -> WritePlan:
        now = to_utc(self._clock())
        cutoff = rotation_cutoff(
            now,
            utc_offset=self.settings.utc_offset,
            rotation_time=self.settings.rotation_time,
        )
        existing = await self.session_index.get(session_id)
        plan = build_write_plan(
            session_id,
            existing,
            batch,
            now=now,
            cutoff=cutoff,
            split_marker=self.settings.split_marker,
            name_for=self.segment_name_for,
        )

        if plan.rotation_needed:
            assert existing is not None
            logger.info(
                "Session %s segment %s predates cutoff %s (marker index %s)",
                session_id,
                existing.segment_name,
                cutoff.isoformat(),
                plan.split_index,
            )

        for step_number, step in enumerate(plan.steps, start=1):
            try:
                await self._apply_step(agent_id, session_id, step)
            except Exception:
                logger.error(
                    "Write step %d/%d for session %s on segment %s failed",
                    step_number,
                    len(plan.steps),
                    session_id,
                    step.segment_name,
                    exc_info=True,
                )
                raise
        return plan

    async def _apply_step(self, agent_id: str, session_id: str, step: SegmentWrite) -> None:
        if step.new_state is not None:
            await self.session_index.put(step.new_state)
            logger.info("Session %s now writes to %s", session_id, step.new_state.segment_name)
        text = serialize_batch(agent_id, session_id, step.records, self.settings.line_terminator)
        await append_to_segment(self.segment_store, step.segment_name, text)
        logger.debug("Appended %d records to %s", len(step.records), step.segment_name)


__all__ = ["ApiDataWriter", "Clock"]

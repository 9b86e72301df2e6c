#!/usr/bin/env python3
"""Replay captured API data batches from a JSONL file into segment storage.

Each input line is one batch:
    {"agent_id": "...", "session_id": "...", "records": [{"RequestUri": "...", ...}, ...]}

Usage:
    python -m scripts.replay_api_data batches.jsonl [--service-name replay]
"""

import argparse
import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Mapping

from apidata_store import ApiDataValidationError, ApiDataWriter, TransactionRecord, create_api_data_writer
from apidata_store.logging_config import setup_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplayBatch:
    agent_id: str
    session_id: str
    records: List[TransactionRecord]


def parse_batch(line: str, line_number: int) -> ReplayBatch:
    """Decode one JSONL line into a batch."""
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as exc:
        raise ApiDataValidationError(f"Line {line_number} is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise ApiDataValidationError(f"Line {line_number} must be a JSON object")

    agent_id = payload.get("agent_id")
    session_id = payload.get("session_id")
    raw_records = payload.get("records")
    if not isinstance(agent_id, str) or not isinstance(session_id, str):
        raise ApiDataValidationError(f"Line {line_number} needs string agent_id and session_id")
    if not isinstance(raw_records, list):
        raise ApiDataValidationError(f"Line {line_number} needs a records list")

    records = [_parse_record(item, line_number, index) for index, item in enumerate(raw_records)]
    return ReplayBatch(agent_id=agent_id, session_id=session_id, records=records)


def _parse_record(item: object, line_number: int, index: int) -> TransactionRecord:
    if not isinstance(item, Mapping):
        raise ApiDataValidationError(f"Line {line_number} records[{index}] must be a JSON object")
    try:
        return TransactionRecord.from_mapping(item)
    except ApiDataValidationError as exc:
        raise ApiDataValidationError(f"Line {line_number} records[{index}]: {exc}") from exc


def iter_batches(path: Path) -> Iterator[ReplayBatch]:
    with path.open(encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            if not line.strip():
                continue
            yield parse_batch(line, line_number)


async def replay(writer: ApiDataWriter, path: Path) -> tuple[int, int]:
    """Write every batch in ``path``; returns (batches, records) written."""
    batch_count = 0
    record_count = 0
    for batch in iter_batches(path):
        await writer.write(batch.agent_id, batch.session_id, batch.records)
        batch_count += 1
        record_count += len(batch.records)
        logger.debug("Replayed %d records for session %s", len(batch.records), batch.session_id)
    return batch_count, record_count


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Replay captured API data into segment storage")
    parser.add_argument("path", type=Path, help="JSONL file of batches")
    parser.add_argument("--service-name", default=None, help="Also log to logs/<service-name>.log")
    args = parser.parse_args()

    setup_logging(args.service_name)

    async with create_api_data_writer() as writer:
        batches, records = await replay(writer, args.path)
    logger.info("Replayed %d batches (%d records) from %s", batches, records, args.path)


if __name__ == "__main__":
    asyncio.run(main())

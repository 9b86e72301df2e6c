"""Per-session, daily-rotated storage of captured API traffic."""

from .data_models import SessionState, TransactionRecord
from .errors import ApiDataValidationError, SessionStateDecodeError
from .rotation import ApiDataWriter, create_api_data_writer

__all__ = [
    "ApiDataValidationError",
    "ApiDataWriter",
    "SessionState",
    "SessionStateDecodeError",
    "TransactionRecord",
    "create_api_data_writer",
]

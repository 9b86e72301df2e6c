"""Data models for captured API traffic and session routing state."""

from .session_state import SessionState
from .transaction_record import TransactionRecord

__all__ = ["SessionState", "TransactionRecord"]

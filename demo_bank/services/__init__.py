"""Business logic services."""

from demo_bank.services.ledger_store import LedgerStore, UserLockRegistry
from demo_bank.services.session_service import SessionService
from demo_bank.services.query_service import QueryService
from demo_bank.services.transfer_service import TransferService

__all__ = [
    "LedgerStore",
    "UserLockRegistry",
    "SessionService",
    "QueryService",
    "TransferService",
]

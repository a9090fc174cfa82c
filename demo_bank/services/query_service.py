"""
Query service: read-only access to a user's accounts and
transactions.

Reads happen inside the user's lock scope so a concurrent
transfer is never observed with one balance updated and the
other not.
"""

from sqlalchemy.orm import Session

from demo_bank.exceptions import UserNotFound
from demo_bank.models.account import Account
from demo_bank.models.transaction import Transaction
from demo_bank.services.ledger_store import LedgerStore


class QueryService:

    def __init__(self, db: Session, store: LedgerStore | None = None):
        self.db = db
        self.store = store or LedgerStore(db)

    def _require_user(self, user_id: int) -> None:
        if self.store.get_user(user_id) is None:
            raise UserNotFound()

    def list_accounts(self, user_id: int) -> list[Account]:
        """Get all accounts for a user, ordered by account id."""
        with self.store.lock(user_id):
            self._require_user(user_id)
            return self.store.list_accounts(user_id)

    def list_transactions(self, user_id: int) -> list[Transaction]:
        """Get all transactions for a user, newest first."""
        with self.store.lock(user_id):
            self._require_user(user_id)
            return self.store.list_transactions(user_id)

"""
Ledger store: the only stateful component.

LedgerStore wraps a SQLAlchemy session and is the single place
the services read and write users, accounts and transactions.
It also owns the per-user lock scope that serializes the
check-and-mutate sequence of a transfer.

Locks live in a process-wide UserLockRegistry rather than on the
store, because each request builds its own store around its own
session while the lock must be shared by all of them.
"""

import threading
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from demo_bank.models.user import User
from demo_bank.models.account import Account
from demo_bank.models.transaction import Transaction


class UserLockRegistry:
    """Hands out one exclusive lock per user id, creating it on first use."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[int, threading.Lock] = {}

    def get(self, user_id: int) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(user_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[user_id] = lock
            return lock


user_locks = UserLockRegistry()


class LedgerStore:

    def __init__(self, db: Session, locks: UserLockRegistry = user_locks):
        self.db = db
        self.locks = locks

    @contextmanager
    def lock(self, user_id: int) -> Iterator["LedgerStore"]:
        """
        Hold the user's exclusive lock for the duration of the block.

        Cached ORM state is expired on entry so everything read inside
        the block reflects the last committed write, not what this
        session saw before another request changed it. The lock is
        released on every exit path, including exceptions.
        """
        with self.locks.get(user_id):
            self.db.expire_all()
            yield self

    # --- Reads ---

    def get_user(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def get_user_by_email(self, email: str) -> User | None:
        return self.db.execute(
            select(User).where(User.email == email)
        ).scalar_one_or_none()

    def get_account(self, user_id: int, account_id: str) -> Account | None:
        """Return the account only if user_id owns it."""
        return self.db.get(Account, (user_id, account_id))

    def list_accounts(self, user_id: int) -> list[Account]:
        accounts = self.db.execute(
            select(Account)
            .where(Account.user_id == user_id)
            .order_by(Account.id)
        ).scalars().all()
        return list(accounts)

    def list_transactions(self, user_id: int) -> list[Transaction]:
        """All of a user's transactions, most recently appended first."""
        transactions = self.db.execute(
            select(Transaction)
            .where(Transaction.user_id == user_id)
            .order_by(Transaction.sequence.desc())
        ).scalars().all()
        return list(transactions)

    # --- Writes ---

    def put(self, obj) -> None:
        """Stage a new or changed record; it is written on flush or commit."""
        self.db.add(obj)

    def append(self, transaction: Transaction) -> Transaction:
        """
        Add a transaction after every existing one of its user.

        Flushes immediately so the next append sees it. Call inside
        lock() so two appends cannot take the same sequence number.
        """
        last = self.db.execute(
            select(func.coalesce(func.max(Transaction.sequence), 0))
            .where(Transaction.user_id == transaction.user_id)
        ).scalar_one()
        transaction.sequence = last + 1
        self.db.add(transaction)
        self.db.flush()
        return transaction

    def flush(self) -> None:
        self.db.flush()

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

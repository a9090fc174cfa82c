"""
Transfer service: moves money between two accounts of one user.

A transfer:
1. Takes the user's lock
2. Resolves both accounts (they must belong to the user)
3. Rejects a transfer to the same account
4. Validates the amount (positive, at most two decimal places)
5. Checks the source balance covers the amount
6. Moves the balances and appends one transaction per account
7. Commits, then reads back the user's accounts and transactions

Steps 2-7 all run inside the lock, so two transfers from the same
account can never both pass the balance check against the same
starting balance. Unlike the other services, this one commits
itself: the commit has to happen before the lock is released.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from sqlalchemy.orm import Session

from demo_bank.exceptions import (
    AccountNotFound,
    BankError,
    InsufficientFunds,
    InvalidAmount,
    SameAccountTransfer,
    UserNotFound,
)
from demo_bank.logging_config import get_logger, log_event
from demo_bank.models.account import Account
from demo_bank.models.enums import TransactionType
from demo_bank.models.transaction import Transaction
from demo_bank.schemas.transaction import TransferRequest
from demo_bank.services.ledger_store import LedgerStore

logger = get_logger(__name__)

DEFAULT_DESCRIPTION = "Internal Transfer"
CENT = Decimal("0.01")


@dataclass
class TransferResult:
    accounts: list[Account]
    transactions: list[Transaction]
    debit: Transaction
    credit: Transaction


def validate_amount(amount: Decimal) -> Decimal:
    """Return the amount scaled to cents, or raise InvalidAmount."""
    if not amount.is_finite() or amount <= 0:
        raise InvalidAmount()
    try:
        scaled = amount.quantize(CENT)
    except InvalidOperation:
        # Too many digits to express in cents; no balance can cover it,
        # so the funds check rejects it.
        return amount
    if amount != scaled:
        raise InvalidAmount()
    return scaled


class TransferService:

    def __init__(self, db: Session, store: LedgerStore | None = None):
        self.db = db
        self.store = store or LedgerStore(db)

    def _resolve_accounts(
        self, user_id: int, request: TransferRequest
    ) -> tuple[Account, Account]:
        if self.store.get_user(user_id) is None:
            raise UserNotFound()

        source = self.store.get_account(user_id, request.from_account_id)
        destination = self.store.get_account(user_id, request.to_account_id)
        if source is None or destination is None:
            raise AccountNotFound()
        return source, destination

    def _post(
        self, user_id: int, request: TransferRequest
    ) -> tuple[Transaction, Transaction]:
        source, destination = self._resolve_accounts(user_id, request)

        if source.id == destination.id:
            raise SameAccountTransfer()

        amount = validate_amount(request.amount)

        if source.balance < amount:
            raise InsufficientFunds()

        description = (request.description or "").strip() or DEFAULT_DESCRIPTION
        today = datetime.now(timezone.utc).date()

        source.balance = source.balance - amount
        destination.balance = destination.balance + amount

        debit = Transaction(
            user_id=user_id,
            account_id=source.id,
            transaction_date=today,
            description=description,
            amount=-amount,
            transaction_type=TransactionType.TRANSFER,
        )
        credit = Transaction(
            user_id=user_id,
            account_id=destination.id,
            transaction_date=today,
            description=description,
            amount=amount,
            transaction_type=TransactionType.TRANSFER,
        )
        # Debit leg first: it takes the lower id and lists after the credit
        self.store.append(debit)
        self.store.append(credit)
        return debit, credit

    def transfer(self, user_id: int, request: TransferRequest) -> TransferResult:
        """
        Execute a transfer and return the user's updated ledger.

        Any failure rolls back every change made by this call and
        leaves balances and transactions as they were.
        """
        with self.store.lock(user_id):
            try:
                debit, credit = self._post(user_id, request)
                self.store.commit()
            except BankError as e:
                self.store.rollback()
                log_event(
                    logger, "info", f"Transfer rejected: {e}",
                    user_id=user_id, action="transfer",
                    resource=request.from_account_id,
                )
                raise
            except Exception:
                self.store.rollback()
                raise

            log_event(
                logger, "info", "Transfer completed",
                user_id=user_id, action="transfer",
                resource=request.from_account_id,
                details={
                    "to_account_id": request.to_account_id,
                    "amount": str(credit.amount),
                    "transaction_ids": [debit.id, credit.id],
                },
            )

            return TransferResult(
                accounts=self.store.list_accounts(user_id),
                transactions=self.store.list_transactions(user_id),
                debit=debit,
                credit=credit,
            )

"""
Demo dataset.

One user with a checking and a savings account and a short
transaction history. The store is seeded once at startup; seeding
an already seeded store does nothing.

Demo credentials: demo@bank.com / password123
"""

from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from demo_bank.config import get_settings
from demo_bank.logging_config import get_logger
from demo_bank.models.account import Account
from demo_bank.models.enums import AccountType, TransactionType
from demo_bank.models.transaction import Transaction
from demo_bank.models.user import User
from demo_bank.services.ledger_store import LedgerStore
from demo_bank.services.session_service import hash_password

logger = get_logger(__name__)

DEMO_USER_ID = 1
DEMO_USER_EMAIL = "demo@bank.com"
DEMO_USER_PASSWORD = "password123"
DEMO_USER_NAME = "Demo User"

DEMO_ACCOUNTS = [
    ("acc-001", AccountType.CHECKING, "5420.50", "****1234"),
    ("acc-002", AccountType.SAVINGS, "12500.00", "****5678"),
]

# Newest first, as the API lists them
DEMO_TRANSACTIONS = [
    (1, date(2026, 1, 28), "Salary Deposit", "3500.00", TransactionType.CREDIT, "acc-001"),
    (2, date(2026, 1, 27), "Grocery Store", "-125.50", TransactionType.DEBIT, "acc-001"),
    (3, date(2026, 1, 26), "Transfer to Savings", "-500.00", TransactionType.TRANSFER, "acc-001"),
    (4, date(2026, 1, 26), "Transfer from Checking", "500.00", TransactionType.TRANSFER, "acc-002"),
    (5, date(2026, 1, 25), "Netflix Subscription", "-15.99", TransactionType.DEBIT, "acc-001"),
]


def seed_demo_data(db: Session, rounds: int | None = None) -> bool:
    """
    Insert the demo user, accounts and transactions.

    Returns True if data was inserted, False if the demo user
    already existed. The caller's session is committed.
    """
    store = LedgerStore(db)
    if store.get_user(DEMO_USER_ID) is not None:
        return False

    if rounds is None:
        rounds = get_settings().BCRYPT_ROUNDS

    store.put(User(
        id=DEMO_USER_ID,
        email=DEMO_USER_EMAIL,
        name=DEMO_USER_NAME,
        password_hash=hash_password(DEMO_USER_PASSWORD, rounds=rounds),
    ))
    store.flush()

    for account_id, account_type, balance, number in DEMO_ACCOUNTS:
        store.put(Account(
            user_id=DEMO_USER_ID,
            id=account_id,
            account_type=account_type,
            account_number=number,
            balance=Decimal(balance),
        ))
    store.flush()

    # Appended oldest first so listings come back in the order above
    for txn_id, day, description, amount, txn_type, account_id in reversed(DEMO_TRANSACTIONS):
        store.append(Transaction(
            id=txn_id,
            user_id=DEMO_USER_ID,
            account_id=account_id,
            transaction_date=day,
            description=description,
            amount=Decimal(amount),
            transaction_type=txn_type,
        ))
    store.commit()

    logger.info("Seeded demo user %s", DEMO_USER_EMAIL)
    return True

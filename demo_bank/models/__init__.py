"""
Database models package.

All models must be imported here so that Base.metadata knows
every table before create_all() runs.
"""

from demo_bank.models.base import Base
from demo_bank.models.enums import AccountType, TransactionType
from demo_bank.models.user import User
from demo_bank.models.account import Account
from demo_bank.models.transaction import Transaction

__all__ = [
    "Base",
    "AccountType",
    "TransactionType",
    "User",
    "Account",
    "Transaction",
]

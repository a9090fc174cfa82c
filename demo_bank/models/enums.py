"""
Shared enumerations for database models.

Values are the lowercase strings the API exposes.
"""

import enum


class AccountType(str, enum.Enum):
    """Kinds of customer account."""
    CHECKING = "checking"
    SAVINGS = "savings"


class TransactionType(str, enum.Enum):
    """How a transaction moved money."""
    CREDIT = "credit"
    DEBIT = "debit"
    TRANSFER = "transfer"

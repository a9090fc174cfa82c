"""
Pydantic schemas for transactions and transfers.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from demo_bank.models.enums import TransactionType
from demo_bank.schemas.account import AccountResponse


class TransactionResponse(BaseModel):
    id: int
    transaction_date: date = Field(alias="date")
    description: str
    amount: float
    transaction_type: TransactionType = Field(alias="type")
    account_id: str = Field(alias="accountId")

    model_config = {"from_attributes": True, "populate_by_name": True}


class TransferRequest(BaseModel):
    """
    Request to move money between two of the caller's accounts.

    The amount is deliberately unconstrained here: the transfer
    engine validates it after resolving the accounts, so the
    error a client sees follows a fixed precedence.
    """
    from_account_id: str = Field(alias="fromAccountId")
    to_account_id: str = Field(alias="toAccountId")
    amount: Decimal
    description: str | None = Field(default=None, max_length=255)

    model_config = {"populate_by_name": True}


class TransferResponse(BaseModel):
    message: str
    accounts: list[AccountResponse]
    transactions: list[TransactionResponse]

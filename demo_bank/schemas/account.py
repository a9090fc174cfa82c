"""
Pydantic schemas for accounts.

Field names follow the ORM attributes; aliases give the
camelCase JSON the frontend reads.
"""

from pydantic import BaseModel, Field

from demo_bank.models.enums import AccountType


class AccountResponse(BaseModel):
    id: str
    account_type: AccountType = Field(alias="type")
    balance: float
    account_number: str = Field(alias="accountNumber")

    model_config = {"from_attributes": True, "populate_by_name": True}

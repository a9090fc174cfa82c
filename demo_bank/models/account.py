"""
Customer account model.

Account ids such as "acc-001" are only unique within their owner,
so the primary key is (user_id, id). Looking an account up by that
pair is also the ownership check: another user's account simply
does not exist from the caller's point of view.

The balance is stored on the row and changed in place by the
transfer engine, always together with the transactions that
explain the change.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, DateTime, Numeric, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from demo_bank.models.base import Base
from demo_bank.models.enums import AccountType


class Account(Base):
    __tablename__ = "accounts"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"), primary_key=True
    )
    id: Mapped[str] = mapped_column(String(20), primary_key=True)
    account_type: Mapped[AccountType] = mapped_column(
        SAEnum(
            AccountType,
            name="account_type_enum",
            create_constraint=True,
        ),
        nullable=False,
    )
    # Masked for display, e.g. "****1234"
    account_number: Mapped[str] = mapped_column(String(20), nullable=False)
    balance: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, default=Decimal("0.00")
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    user: Mapped["User"] = relationship(back_populates="accounts")

    def __repr__(self) -> str:
        return (
            f"<Account {self.id} "
            f"{self.account_type.value} {self.balance}>"
        )

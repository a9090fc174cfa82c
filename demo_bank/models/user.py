"""
User model.

Represents a login identity. A user owns every account and
transaction visible through their session.
"""

from datetime import datetime

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from demo_bank.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    # Matched exactly on login, including case
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    accounts: Mapped[list["Account"]] = relationship(
        back_populates="user", order_by="Account.id"
    )

    def __repr__(self) -> str:
        return f"<User {self.id} {self.email}>"

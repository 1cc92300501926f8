"""
Account model (chart of accounts).

Every line of every journal entry is posted against one of
these accounts. Accounts are created at seed time or on
explicit request and are never modified afterwards.
"""

from sqlalchemy import String, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookkeeping.models.base import Base
from bookkeeping.models.enums import AccountType


class Account(Base):
    """
    A single account in the chart of accounts.

    The code is the display and sort key. Uniqueness is checked
    by AccountService on creation rather than by the schema.
    """

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(primary_key=True)
    code: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[AccountType] = mapped_column(
        SAEnum(AccountType, name="account_type_enum"),
        nullable=False,
    )

    lines: Mapped[list["JournalLine"]] = relationship(
        back_populates="account"
    )

    def __repr__(self) -> str:
        return f"<Account {self.code} ({self.type.value})>"

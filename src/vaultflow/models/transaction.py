"""SQLModel definitions for income and expense transactions."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

INCOME = "income"
EXPENSE = "expense"
TRANSACTION_TYPES = (INCOME, EXPENSE)
WALLETS = ("HR", "HL")

# Fields overwritten by a full replace-update; identity and ownership never change.
MUTABLE_FIELDS = (
    "occurred_on",
    "time",
    "type",
    "amount",
    "category",
    "location",
    "wallet",
    "vault_id",
    "vault_name",
    "notes",
)


class Transaction(SQLModel, table=True):
    """A single ledger entry; income is spread over all vaults, expenses hit one."""

    __tablename__: ClassVar[str] = "transaction"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    occurred_on: date = Field(nullable=False, index=True)
    time: Optional[str] = Field(default=None, max_length=16)
    type: str = Field(nullable=False, max_length=16)
    amount: float = Field(nullable=False, description="Always positive; type decides direction")
    category: str = Field(nullable=False, max_length=64)
    location: Optional[str] = Field(default=None, max_length=128)
    wallet: Optional[str] = Field(default=None, max_length=2)
    # Plain column: deleting a vault leaves dangling references in place.
    vault_id: Optional[int] = Field(default=None, index=True)
    vault_name: Optional[str] = Field(default=None, max_length=128)
    notes: Optional[str] = Field(default=None, max_length=500)
    # Bumped on every replace; writers claim the row by matching it.
    revision: int = Field(default=0, nullable=False)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

"""SQLModel definition for percentage-weighted vaults."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel


class Vault(SQLModel, table=True):
    """A budget bucket receiving a fixed share of every income transaction.

    ``total_income``, ``total_spent`` and ``balance`` are running totals owned by
    the allocation engine; routes never write them directly.
    """

    __tablename__: ClassVar[str] = "vault"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=128)
    percentage: float = Field(nullable=False, description="Share of future income, 0-100")
    description: Optional[str] = Field(default=None, max_length=255)
    total_income: float = Field(default=0.0, nullable=False)
    total_spent: float = Field(default=0.0, nullable=False)
    balance: float = Field(default=0.0, nullable=False)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )

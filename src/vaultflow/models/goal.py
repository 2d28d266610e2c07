"""Savings goal table."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

GOAL_STATUSES = ("active", "completed", "archived")


class Goal(SQLModel, table=True):
    """A savings target, optionally mirrored from a vault's live balance."""

    __tablename__: ClassVar[str] = "goal"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=128)
    target_amount: float = Field(nullable=False)
    current_amount: float = Field(default=0.0, nullable=False)
    vault_id: Optional[int] = Field(default=None, index=True)
    vault_name: Optional[str] = Field(default=None, max_length=128)
    deadline: Optional[date] = Field(default=None)
    status: str = Field(default="active", nullable=False, max_length=16)
    notes: Optional[str] = Field(default=None, max_length=500)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )

"""Savings goal services and the live-balance projection."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..domain.repositories import GoalRepository, VaultRepository
from ..errors import NotFoundError
from ..models.goal import Goal

GOAL_FIELDS = (
    "name",
    "target_amount",
    "current_amount",
    "vault_id",
    "vault_name",
    "deadline",
    "status",
    "notes",
)


@dataclass(slots=True)
class GoalView:
    """Read-side view of a goal.

    ``stored_amount`` is what the goal row holds; ``current_amount`` is what
    callers see, replaced by the linked vault's live balance when one exists.
    """

    id: int
    name: str
    target_amount: float
    stored_amount: float
    current_amount: float
    vault_id: Optional[int]
    vault_name: Optional[str]
    deadline: Optional[date]
    status: str
    notes: Optional[str]
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "targetAmount": self.target_amount,
            "currentAmount": self.current_amount,
            "vaultId": self.vault_id,
            "vaultName": self.vault_name,
            "deadline": self.deadline.isoformat() if self.deadline else None,
            "status": self.status,
            "notes": self.notes,
            "createdAt": self.created_at.isoformat(),
        }


def project_goal(goal: Goal, balances: Mapping[int, float]) -> GoalView:
    """Build the view for ``goal`` given the owner's vault balances by id."""

    live = balances.get(goal.vault_id) if goal.vault_id is not None else None
    return GoalView(
        id=goal.id,  # type: ignore[arg-type]
        name=goal.name,
        target_amount=goal.target_amount,
        stored_amount=goal.current_amount,
        current_amount=goal.current_amount if live is None else live,
        vault_id=goal.vault_id,
        vault_name=goal.vault_name,
        deadline=goal.deadline,
        status=goal.status,
        notes=goal.notes,
        created_at=goal.created_at,
    )


def list_goals(
    goal_repo: GoalRepository, vault_repo: VaultRepository, *, user_id: int
) -> list[GoalView]:
    """Return the user's goals, newest first, with vault-linked amounts made live."""

    balances = {
        vault.id: vault.balance
        for vault in vault_repo.list_all(user_id=user_id)
        if vault.id is not None
    }
    return [project_goal(goal, balances) for goal in goal_repo.list_all(user_id=user_id)]


def create_goal(repo: GoalRepository, fields: Mapping[str, Any], *, user_id: int) -> Goal:
    values = {name: fields.get(name) for name in GOAL_FIELDS}
    values["current_amount"] = values.get("current_amount") or 0.0
    values["status"] = values.get("status") or "active"
    return repo.create(Goal(user_id=user_id, **values), user_id=user_id)


def update_goal(
    repo: GoalRepository, goal_id: int, fields: Mapping[str, Any], *, user_id: int
) -> Goal:
    """Overwrite the goal's fields; ``current_amount`` is stored as given."""

    goal = repo.get_by_id(goal_id, user_id=user_id)
    if goal is None:
        raise NotFoundError("Goal not found")
    for name in GOAL_FIELDS:
        setattr(goal, name, fields.get(name))
    goal.current_amount = goal.current_amount or 0.0
    goal.status = goal.status or "active"
    return repo.update(goal, user_id=user_id)


def delete_goal(repo: GoalRepository, goal_id: int, *, user_id: int) -> None:
    if not repo.delete(goal_id, user_id=user_id):
        raise NotFoundError("Goal not found")

"""Goal payload validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from ...errors import ValidationError
from ...models.goal import GOAL_STATUSES
from ..fields import (
    MAX_AMOUNT,
    FieldError,
    clean_text,
    is_blank,
    parse_amount,
    parse_date,
    parse_number,
    parse_optional_id,
)

REQUIRED_MESSAGE = "Name and target amount required"


@dataclass(slots=True)
class GoalForm:
    """Represents a goal create/replace payload."""

    name: Optional[str] = None
    target_amount: float | None = None
    current_amount: float | None = None
    vault_id: Optional[int] = None
    vault_name: Optional[str] = None
    deadline: date | None = None
    status: Optional[str] = None
    notes: Optional[str] = None
    errors: dict[str, list[str]] = field(default_factory=dict, init=False)
    raw_data: dict[str, Any] = field(default_factory=dict, init=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GoalForm:
        form = cls()
        form.raw_data = dict(data)
        return form

    def validate(self) -> bool:
        self.errors.clear()
        raw = self.raw_data

        self.name = clean_text(raw.get("name"))
        target_raw = raw.get("targetAmount")
        if not self.name or is_blank(target_raw) or target_raw == 0:
            self._add_error("name" if not self.name else "targetAmount", REQUIRED_MESSAGE)
            return False

        try:
            self.target_amount = parse_amount(target_raw, label="target amount")
        except FieldError as exc:
            self._add_error("targetAmount", str(exc))

        current_raw = raw.get("currentAmount")
        if not is_blank(current_raw):
            try:
                self.current_amount = parse_number(current_raw, label="current amount")
                if abs(self.current_amount) > MAX_AMOUNT:
                    raise FieldError(f"Current amount must not exceed {MAX_AMOUNT:,}.")
            except FieldError as exc:
                self._add_error("currentAmount", str(exc))

        try:
            self.vault_id = parse_optional_id(raw.get("vaultId"), label="Vault")
        except FieldError as exc:
            self._add_error("vaultId", str(exc))

        deadline_raw = raw.get("deadline")
        if not is_blank(deadline_raw):
            try:
                self.deadline = parse_date(deadline_raw)
            except FieldError as exc:
                self._add_error("deadline", str(exc))

        self.status = clean_text(raw.get("status"))
        if self.status is not None:
            self.status = self.status.lower()
            if self.status not in GOAL_STATUSES:
                self._add_error("status", "Status must be active, completed, or archived.")

        self.vault_name = clean_text(raw.get("vaultName"))
        self.notes = clean_text(raw.get("notes"))
        return not self.errors

    def validated_fields(self) -> dict[str, Any]:
        if not self.validate():
            message = next(iter(self.errors.values()))[0]
            raise ValidationError(message, fields=dict(self.errors))
        return {
            "name": self.name,
            "target_amount": self.target_amount,
            "current_amount": self.current_amount,
            "vault_id": self.vault_id,
            "vault_name": self.vault_name,
            "deadline": self.deadline,
            "status": self.status,
            "notes": self.notes,
        }

    def _add_error(self, field: str, message: str) -> None:
        self.errors.setdefault(field, []).append(message)

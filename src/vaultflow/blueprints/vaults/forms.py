"""Vault payload validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from ...errors import ValidationError
from ..fields import FieldError, clean_text, is_blank, parse_number


@dataclass(slots=True)
class VaultForm:
    """Name, percentage and description for a vault create or edit."""

    name: Optional[str] = None
    percentage: float | None = None
    description: Optional[str] = None
    errors: dict[str, list[str]] = field(default_factory=dict, init=False)
    raw_data: dict[str, Any] = field(default_factory=dict, init=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> VaultForm:
        form = cls()
        form.raw_data = dict(data)
        return form

    def validate(self) -> bool:
        self.errors.clear()
        raw = self.raw_data

        self.name = clean_text(raw.get("name"))
        if not self.name:
            self._add_error("name", "Name and percentage required")
        elif len(self.name) > 128:
            self._add_error("name", "Name must be 128 characters or fewer.")

        # Zero is a legitimate share, so only a missing value is rejected here.
        if is_blank(raw.get("percentage")):
            self._add_error("percentage", "Name and percentage required")
        else:
            try:
                percentage = parse_number(raw["percentage"], label="percentage")
            except FieldError as exc:
                self._add_error("percentage", str(exc))
            else:
                if not 0 <= percentage <= 100:
                    self._add_error("percentage", "Percentage must be between 0 and 100.")
                else:
                    self.percentage = percentage

        self.description = clean_text(raw.get("description"))
        return not self.errors

    def validated_fields(self) -> dict[str, Any]:
        if not self.validate():
            message = next(iter(self.errors.values()))[0]
            raise ValidationError(message, fields=dict(self.errors))
        return {
            "name": self.name,
            "percentage": self.percentage,
            "description": self.description,
        }

    def _add_error(self, field: str, message: str) -> None:
        self.errors.setdefault(field, []).append(message)

"""Transaction payload validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from ...errors import ValidationError
from ...models.transaction import TRANSACTION_TYPES, WALLETS
from ..fields import FieldError, clean_text, is_blank, parse_amount, parse_date, parse_optional_id

REQUIRED_MESSAGE = "Date, type, amount, and category required"


@dataclass(slots=True)
class TransactionForm:
    """Represents a create/replace payload prior to validation."""

    occurred_on: date | None = None
    time: Optional[str] = None
    type: Optional[str] = None
    amount: float | None = None
    category: Optional[str] = None
    location: Optional[str] = None
    wallet: Optional[str] = None
    vault_id: Optional[int] = None
    vault_name: Optional[str] = None
    notes: Optional[str] = None
    errors: dict[str, list[str]] = field(default_factory=dict, init=False)
    raw_data: dict[str, Any] = field(default_factory=dict, init=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TransactionForm:
        form = cls()
        form.raw_data = dict(data)
        return form

    def validate(self) -> bool:
        """Validate the bound data and populate typed attributes."""

        self.errors.clear()
        raw = self.raw_data

        # A zero amount counts as missing, like any other falsy required value.
        required = ("date", "type", "amount", "category")
        if any(is_blank(raw.get(key)) or raw.get(key) == 0 for key in required):
            for key in required:
                if is_blank(raw.get(key)) or raw.get(key) == 0:
                    self._add_error(key, "This field is required.")
            return False

        try:
            self.occurred_on = parse_date(raw["date"])
        except FieldError as exc:
            self._add_error("date", str(exc))

        self.type = str(raw["type"]).strip().lower()
        if self.type not in TRANSACTION_TYPES:
            self._add_error("type", "Type must be 'income' or 'expense'.")

        try:
            self.amount = parse_amount(raw["amount"], label="amount")
        except FieldError as exc:
            self._add_error("amount", str(exc))

        self.category = clean_text(raw["category"])
        if self.category and len(self.category) > 64:
            self._add_error("category", "Category must be 64 characters or fewer.")

        try:
            self.vault_id = parse_optional_id(raw.get("vaultId"), label="Vault")
        except FieldError as exc:
            self._add_error("vaultId", str(exc))

        self.wallet = clean_text(raw.get("wallet"))
        if self.wallet is not None:
            self.wallet = self.wallet.upper()
            if self.wallet not in WALLETS:
                self._add_error("wallet", "Wallet must be HR or HL.")

        self.time = clean_text(raw.get("time"))
        self.location = clean_text(raw.get("location"))
        self.vault_name = clean_text(raw.get("vaultName"))
        self.notes = clean_text(raw.get("notes"))

        return not self.errors

    def validated_fields(self) -> dict[str, Any]:
        """Validate and return model-named fields, or raise ``ValidationError``."""

        if not self.validate():
            message = (
                REQUIRED_MESSAGE
                if any("This field is required." in msgs for msgs in self.errors.values())
                else next(iter(self.errors.values()))[0]
            )
            raise ValidationError(message, fields=dict(self.errors))
        return {
            "occurred_on": self.occurred_on,
            "time": self.time,
            "type": self.type,
            "amount": self.amount,
            "category": self.category,
            "location": self.location,
            "wallet": self.wallet,
            "vault_id": self.vault_id,
            "vault_name": self.vault_name,
            "notes": self.notes,
        }

    def _add_error(self, field: str, message: str) -> None:
        """Accumulate validation errors for a specific field."""

        self.errors.setdefault(field, []).append(message)

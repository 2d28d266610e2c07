"""Coercion helpers shared by the JSON request forms."""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, Optional


# Keeps amount * percentage well inside float range.
MAX_AMOUNT = 1_000_000_000_000


class FieldError(ValueError):
    """A single field failed to coerce; the message is user-facing."""


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def clean_text(value: Any) -> Optional[str]:
    """Strip strings and map blanks to None."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_number(value: Any, *, label: str) -> float:
    """Accept ints, floats and numeric strings; reject booleans."""

    if isinstance(value, bool):
        raise FieldError(f"Enter a valid number for the {label}.")
    try:
        number = float(value) if isinstance(value, (int, float)) else float(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise FieldError(f"Enter a valid number for the {label}.") from exc
    if not math.isfinite(number):
        raise FieldError(f"Enter a valid number for the {label}.")
    return number


def parse_amount(value: Any, *, label: str) -> float:
    """A positive money amount no larger than ``MAX_AMOUNT``."""

    amount = parse_number(value, label=label)
    if amount <= 0:
        raise FieldError(f"{label.capitalize()} must be greater than zero.")
    if amount > MAX_AMOUNT:
        raise FieldError(f"{label.capitalize()} must not exceed {MAX_AMOUNT:,}.")
    return amount


def parse_optional_id(value: Any, *, label: str) -> Optional[int]:
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise FieldError(f"{label} must be a whole number.")
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise FieldError(f"{label} must be a whole number.") from exc
    if parsed <= 0:
        raise FieldError(f"{label} must be greater than zero.")
    return parsed


def parse_date(value: Any) -> date:
    """Parse ``YYYY-MM-DD`` or a full ISO timestamp, keeping the calendar day."""

    raw = str(value).strip()
    try:
        if len(raw) == 10:
            return datetime.strptime(raw, "%Y-%m-%d").date()
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
    except ValueError as exc:
        raise FieldError("Enter a valid date (YYYY-MM-DD).") from exc

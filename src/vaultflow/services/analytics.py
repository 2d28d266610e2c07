"""Dashboard summary over a user's transactions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..models.transaction import EXPENSE, INCOME, Transaction


@dataclass(slots=True)
class Summary:
    """Lightweight DTO for the dashboard header."""

    total_income: float
    total_expenses: float
    transaction_count: int

    @property
    def net_savings(self) -> float:
        return self.total_income - self.total_expenses

    @property
    def savings_rate(self) -> float:
        """Net savings as a percentage of income, one decimal; 0 without income."""
        if self.total_income <= 0:
            return 0.0
        return round(self.net_savings / self.total_income * 100, 1)

    def to_dict(self) -> dict[str, float | int]:
        return {
            "totalIncome": self.total_income,
            "totalExpenses": self.total_expenses,
            "netSavings": self.net_savings,
            "savingsRate": self.savings_rate,
            "transactionCount": self.transaction_count,
        }


def summarize(transactions: Iterable[Transaction]) -> Summary:
    """Total every income and expense, vault-targeted or not."""

    txs = list(transactions)
    income = sum(t.amount for t in txs if t.type == INCOME)
    expenses = sum(t.amount for t in txs if t.type == EXPENSE)
    return Summary(total_income=income, total_expenses=expenses, transaction_count=len(txs))

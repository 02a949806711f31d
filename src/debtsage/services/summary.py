"""Portfolio-level rollups over a static list of debts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..models.debt import Debt
from .money import round_money


@dataclass(slots=True)
class DebtSummary:
    """Aggregate figures for the debts overview."""

    total_balance: float
    total_minimum_payments: float
    total_credit_limit: float
    credit_utilization: float
    principal_paid: float
    percent_paid: float
    debts_by_category: dict[str, float] = field(default_factory=dict)


def calculate_debt_summary(debts: Sequence[Debt]) -> DebtSummary:
    """Summarize balances, minimums, utilization and progress.

    Utilization only considers debts carrying a positive credit limit.
    """

    total_balance = sum((d.balance for d in debts), 0.0)
    total_original = sum((d.original_balance for d in debts), 0.0)
    total_minimums = sum((d.minimum_payment for d in debts), 0.0)

    limited = [d for d in debts if d.credit_limit and d.credit_limit > 0]
    total_limit = sum((d.credit_limit for d in limited), 0.0)
    used = sum((d.balance for d in limited), 0.0)
    utilization = used / total_limit * 100 if total_limit > 0 else 0.0

    by_category: dict[str, float] = {}
    for debt in debts:
        by_category[debt.category] = by_category.get(debt.category, 0.0) + debt.balance

    principal_paid = total_original - total_balance
    percent_paid = principal_paid / total_original * 100 if total_original > 0 else 0.0

    return DebtSummary(
        total_balance=round_money(total_balance),
        total_minimum_payments=round_money(total_minimums),
        total_credit_limit=round_money(total_limit),
        credit_utilization=round_money(utilization),
        principal_paid=round_money(principal_paid),
        percent_paid=round_money(percent_paid),
        debts_by_category={k: round_money(v) for k, v in by_category.items()},
    )

"""Progress milestones and per-debt payoff timeline derived from a plan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..models.debt import Debt
from .money import round_money
from .payoff import MonthlyPayment, PayoffPlan

MILESTONE_DEFINITIONS: tuple[tuple[int, str], ...] = (
    (25, "Quarter Way!"),
    (50, "Halfway!"),
    (75, "Almost There!"),
    (100, "Debt Free!"),
)


@dataclass(slots=True)
class OverallMilestone:
    percent: int
    label: str
    is_reached: bool
    amount_at_milestone: float
    estimated_date: str | None = None


@dataclass(slots=True)
class DebtTimelineEntry:
    debt_id: str
    debt_name: str
    payoff_date: str
    current_balance: float
    original_balance: float
    percent_paid: float
    is_completed: bool


def compute_overall_milestones(
    percent_paid: float,
    total_original_balance: float,
    monthly_breakdown: Sequence[MonthlyPayment],
) -> list[OverallMilestone]:
    """Return the 25/50/75/100 % milestones.

    The estimated date is the first projected month in which cumulative
    principal reaches the milestone amount.
    """

    milestones: list[OverallMilestone] = []
    for percent, label in MILESTONE_DEFINITIONS:
        target = total_original_balance * (percent / 100)
        estimated: str | None = None
        cumulative = 0.0
        for month in monthly_breakdown:
            cumulative += month.total_principal
            if cumulative >= target:
                estimated = f"{month.month}-01"
                break
        milestones.append(
            OverallMilestone(
                percent=percent,
                label=label,
                is_reached=percent_paid >= percent,
                amount_at_milestone=round_money(target),
                estimated_date=estimated,
            )
        )
    return milestones


def compute_debt_payoff_timeline(debts: Sequence[Debt], plan: PayoffPlan) -> list[DebtTimelineEntry]:
    """Return one entry per debt, completed debts first, then by payoff date.

    Debts without a milestone in ``plan`` fall back to the plan's
    debt-free date.
    """

    payoff_dates = {
        milestone.debt_id: milestone.payoff_date
        for step in plan.steps
        for milestone in step.milestones_in_step
    }

    entries = []
    for debt in debts:
        if debt.original_balance > 0:
            percent = min(100.0, (debt.original_balance - debt.balance) / debt.original_balance * 100)
        else:
            percent = 0.0
        entries.append(
            DebtTimelineEntry(
                debt_id=debt.id,
                debt_name=debt.name,
                payoff_date=payoff_dates.get(debt.id, plan.debt_free_date),
                current_balance=round_money(debt.balance),
                original_balance=round_money(debt.original_balance),
                percent_paid=round_money(percent),
                is_completed=debt.balance <= 0,
            )
        )

    entries.sort(key=lambda e: (not e.is_completed, e.payoff_date))
    return entries

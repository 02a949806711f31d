"""Income aggregation: paycheck frequency to monthly gross and net."""

from __future__ import annotations

from typing import Iterable

from ..models.income import BudgetSettings, IncomeSource, IncomeType, PayFrequency

# Paychecks per month by pay frequency.
PAYCHECKS_PER_MONTH: dict[PayFrequency, float] = {
    PayFrequency.WEEKLY: 52 / 12,
    PayFrequency.BI_WEEKLY: 26 / 12,
    PayFrequency.SEMI_MONTHLY: 2.0,
    PayFrequency.MONTHLY: 1.0,
}


def calculate_gross_monthly_income(source: IncomeSource) -> float:
    """Return gross monthly income for one source.

    Salary sources multiply the per-paycheck amount by the paychecks per
    month; hourly sources use ``hourly_rate * hours_per_week * 52 / 12``.
    A missing or zero required field yields 0.
    """

    if source.type == IncomeType.SALARY and source.amount:
        return source.amount * PAYCHECKS_PER_MONTH.get(source.pay_frequency, 0.0)
    if source.type == IncomeType.HOURLY and source.hourly_rate and source.hours_per_week:
        return source.hourly_rate * source.hours_per_week * 52 / 12
    return 0.0


def calculate_total_deduction_percent(source: IncomeSource) -> float:
    """Return the additive sum of all deduction percentages."""

    d = source.deductions
    if d is None:
        return 0.0
    return d.federal_tax + d.state_tax + d.medicare + d.social_security + d.retirement_401k + d.other


def calculate_net_monthly_income(source: IncomeSource) -> float:
    """Return take-home monthly income, never negative."""

    gross = calculate_gross_monthly_income(source)
    deductions = gross * (calculate_total_deduction_percent(source) / 100)
    return max(0.0, gross - deductions)


def calculate_total_gross_monthly_income(sources: Iterable[IncomeSource]) -> float:
    return sum((calculate_gross_monthly_income(s) for s in sources), 0.0)


def calculate_total_monthly_income(sources: Iterable[IncomeSource]) -> float:
    """Return total net monthly income across all sources."""

    return sum((calculate_net_monthly_income(s) for s in sources), 0.0)


def calculate_available_for_debt(budget: BudgetSettings) -> float:
    """Return net income left after monthly expenses, floored at 0."""

    available = calculate_total_monthly_income(budget.income_sources) - budget.monthly_expenses
    return max(0.0, available)

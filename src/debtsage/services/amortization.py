"""Single-debt amortization schedules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..models.debt import Debt
from .dates import add_months
from .interest import monthly_interest
from .money import PAID_OFF_EPSILON, round_money

# Thirty years; stops runaway projections when payments never cover interest.
MAX_MONTHS = 360


@dataclass(slots=True)
class AmortizationRow:
    """One projected month for a single debt."""

    date: str
    payment: float
    principal: float
    interest: float
    balance: float


@dataclass(slots=True)
class PayoffEstimate:
    payoff_date: str
    months: int
    total_interest: float


def generate_amortization(
    debt: Debt, monthly_payment: float, start_date: date | None = None
) -> list[AmortizationRow]:
    """Project ``debt`` month by month under a fixed payment.

    Each month interest accrues, the payment is capped at balance plus
    interest and the remainder reduces principal. The schedule stops once
    the balance is within a cent of zero or after ``MAX_MONTHS`` rows.
    A payment below the interest charge grows the balance until the cap.
    """

    start = start_date or date.today()
    balance = debt.balance
    schedule: list[AmortizationRow] = []

    while balance > PAID_OFF_EPSILON and len(schedule) < MAX_MONTHS:
        interest = monthly_interest(balance, debt.apr)
        payment = min(monthly_payment, balance + interest)
        principal = payment - interest
        balance = max(0.0, balance - principal)

        schedule.append(
            AmortizationRow(
                date=add_months(start, len(schedule)).isoformat(),
                payment=round_money(payment),
                principal=round_money(principal),
                interest=round_money(interest),
                balance=round_money(balance),
            )
        )

    return schedule


def calculate_payoff_date(
    debt: Debt, monthly_payment: float, start_date: date | None = None
) -> PayoffEstimate:
    """Return when ``debt`` is paid off under a fixed payment and the interest paid."""

    start = start_date or date.today()
    balance = debt.balance
    months = 0
    total_interest = 0.0

    while balance > PAID_OFF_EPSILON and months < MAX_MONTHS:
        interest = monthly_interest(balance, debt.apr)
        total_interest += interest
        payment = min(monthly_payment, balance + interest)
        balance = max(0.0, balance - (payment - interest))
        months += 1

    return PayoffEstimate(
        payoff_date=add_months(start, months).isoformat(),
        months=months,
        total_interest=round_money(total_interest),
    )

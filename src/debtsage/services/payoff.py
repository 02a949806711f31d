"""Multi-debt payoff plan simulation.

Each simulated month pays every open debt its minimum and routes whatever
budget remains ("extra") to the highest-priority open debt. Priority is
fixed once from the strategy ordering of the input debts and never
re-sorted as balances shrink. Months are grouped into steps: a step ends in
the month one or more debts are paid off while others remain open.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, Sequence

from ..logging_config import get_logger
from ..models.debt import Debt
from ..models.strategy import PayoffStrategy, StrategySettings
from .amortization import MAX_MONTHS
from .dates import add_months, month_key
from .interest import monthly_interest
from .money import PAID_OFF_EPSILON, round_money, sum_money
from .strategy import priority_order

logger = get_logger(__name__)

UNDERFUNDED = "underfunded"
MONTH_CAP_REACHED = "month_cap_reached"

PaymentType = Literal["minimum", "extra"]


@dataclass(slots=True)
class PaymentRow:
    """One debt's share of a month's payments."""

    debt_id: str
    debt_name: str
    amount: float
    principal: float
    interest: float
    remaining_balance: float
    type: PaymentType


@dataclass(slots=True)
class MonthlyPayment:
    month: str
    payments: list[PaymentRow]
    total_payment: float
    total_principal: float
    total_interest: float


@dataclass(slots=True)
class Milestone:
    """A debt reaching zero."""

    debt_id: str
    debt_name: str
    payoff_date: str
    total_paid: float
    interest_paid: float


@dataclass(slots=True)
class PayoffStep:
    """A run of months during which the same debt receives the extra payment."""

    step_number: int
    debt_receiving_extra: str | None
    debts_paying_minimum: list[str]
    milestones_in_step: list[Milestone] = field(default_factory=list)
    completion_date: str = ""


@dataclass(slots=True)
class PlanWarning:
    code: str
    message: str


@dataclass(slots=True)
class PayoffPlan:
    """Projected route to zero debt.

    ``debt_free_date`` is the last simulated month even when the month cap
    stopped the projection early; check ``is_complete`` (or the
    ``month_cap_reached`` warning) to tell the two apart.
    """

    debt_free_date: str
    total_payments: float
    total_interest: float
    steps: list[PayoffStep] = field(default_factory=list)
    monthly_breakdown: list[MonthlyPayment] = field(default_factory=list)
    warnings: list[PlanWarning] = field(default_factory=list)
    unpaid_debt_ids: list[str] = field(default_factory=list)

    @property
    def months(self) -> int:
        return len(self.monthly_breakdown)

    @property
    def is_complete(self) -> bool:
        return not self.unpaid_debt_ids

    def has_warning(self, code: str) -> bool:
        return any(w.code == code for w in self.warnings)


@dataclass(slots=True)
class _WorkingDebt:
    """Private mutable copy of a debt for the duration of one simulation."""

    id: str
    name: str
    balance: float
    apr: float
    minimum_payment: float
    paid: float = 0.0
    interest_paid: float = 0.0

    @classmethod
    def from_debt(cls, debt: Debt) -> "_WorkingDebt":
        return cls(
            id=debt.id,
            name=debt.name,
            balance=float(debt.balance),
            apr=float(debt.apr),
            minimum_payment=float(debt.minimum_payment),
        )


def _focus_debt(priority: list[str], active: list[_WorkingDebt]) -> str | None:
    open_ids = {d.id for d in active}
    return next((debt_id for debt_id in priority if debt_id in open_ids), None)


def _open_step(number: int, priority: list[str], active: list[_WorkingDebt]) -> PayoffStep:
    focus = _focus_debt(priority, active)
    return PayoffStep(
        step_number=number,
        debt_receiving_extra=focus,
        debts_paying_minimum=[d.id for d in active if d.id != focus],
    )


def generate_payoff_plan(
    debts: Sequence[Debt],
    settings: StrategySettings,
    start_date: date | None = None,
    *,
    apply_one_time_fundings: bool = False,
) -> PayoffPlan:
    """Simulate paying off ``debts`` month by month under ``settings``.

    Args:
        debts: Debts to project. They are copied, never mutated.
        settings: Strategy and monthly funding.
        start_date: First simulated month; defaults to today. Month ``n`` is
            always ``n`` months after this date, clamped to the month end,
            so a start on the 31st gives Jan 31, Feb 28, Mar 31 rather
            than stepping from the clamped date (Mar 28).
        apply_one_time_fundings: Add each one-time funding to the extra
            payment of the month it is dated in.

    Returns:
        The projected plan. Underfunding and the month cap are reported as
        warnings on the plan, never raised.
    """

    start = start_date or date.today()
    if not debts:
        return PayoffPlan(debt_free_date=start.isoformat(), total_payments=0.0, total_interest=0.0)

    active = [_WorkingDebt.from_debt(d) for d in debts]
    priority = priority_order(debts, settings.strategy)
    funding = settings.recurring_funding.amount
    warnings: list[PlanWarning] = []

    total_minimums = sum((d.minimum_payment for d in debts), 0.0)
    if funding < total_minimums:
        logger.warning(
            "Monthly funding is less than total minimum payments",
            extra={"funding": funding, "total_minimums": total_minimums},
        )
        warnings.append(
            PlanWarning(
                code=UNDERFUNDED,
                message=(
                    f"Monthly funding {round_money(funding):.2f} is below total minimum "
                    f"payments {round_money(total_minimums):.2f}; no extra payment is available."
                ),
            )
        )

    one_time = list(settings.one_time_fundings) if apply_one_time_fundings else []
    applied_fundings: set[str] = set()

    steps: list[PayoffStep] = []
    breakdown: list[MonthlyPayment] = []
    current_step = _open_step(1, priority, active)
    total_payments = 0.0
    total_interest = 0.0
    month = 0

    while active and month < MAX_MONTHS:
        cursor = add_months(start, month)
        key = month_key(cursor)

        extra = max(0.0, funding - sum((d.minimum_payment for d in active), 0.0))
        for funding_event in one_time:
            if funding_event.id not in applied_fundings and month_key(funding_event.date) == key:
                extra += funding_event.amount
                applied_fundings.add(funding_event.id)

        focus = _focus_debt(priority, active)
        rows: list[PaymentRow] = []
        for debt in active:
            receives_extra = debt.id == focus
            payment = debt.minimum_payment + (extra if receives_extra else 0.0)
            interest = monthly_interest(debt.balance, debt.apr)
            actual = min(payment, debt.balance + interest)
            interest_paid = min(interest, actual)
            principal = actual - interest_paid
            debt.balance = max(0.0, debt.balance - principal)

            debt.paid += actual
            debt.interest_paid += interest_paid
            total_payments += actual
            total_interest += interest_paid

            rows.append(
                PaymentRow(
                    debt_id=debt.id,
                    debt_name=debt.name,
                    amount=round_money(actual),
                    principal=round_money(principal),
                    interest=round_money(interest_paid),
                    remaining_balance=round_money(debt.balance),
                    type="extra" if receives_extra else "minimum",
                )
            )

        breakdown.append(
            MonthlyPayment(
                month=key,
                payments=rows,
                total_payment=sum_money(r.amount for r in rows),
                total_principal=sum_money(r.principal for r in rows),
                total_interest=sum_money(r.interest for r in rows),
            )
        )

        paid_off = [d for d in active if d.balance <= PAID_OFF_EPSILON]
        for debt in paid_off:
            current_step.milestones_in_step.append(
                Milestone(
                    debt_id=debt.id,
                    debt_name=debt.name,
                    payoff_date=cursor.isoformat(),
                    total_paid=round_money(debt.paid),
                    interest_paid=round_money(debt.interest_paid),
                )
            )
        active = [d for d in active if d.balance > PAID_OFF_EPSILON]

        if paid_off and active:
            current_step.completion_date = cursor.isoformat()
            steps.append(current_step)
            current_step = _open_step(len(steps) + 1, priority, active)

        month += 1

    last_month = add_months(start, month - 1)
    current_step.completion_date = last_month.isoformat()
    steps.append(current_step)

    if active:
        logger.warning(
            "Payoff projection stopped at the month cap with debts still open",
            extra={"max_months": MAX_MONTHS, "open_debts": [d.id for d in active]},
        )
        warnings.append(
            PlanWarning(
                code=MONTH_CAP_REACHED,
                message=(
                    f"Projection stopped after {MAX_MONTHS} months with "
                    f"{len(active)} debt(s) still open."
                ),
            )
        )

    return PayoffPlan(
        debt_free_date=last_month.isoformat(),
        total_payments=round_money(total_payments),
        total_interest=round_money(total_interest),
        steps=steps,
        monthly_breakdown=breakdown,
        warnings=warnings,
        unpaid_debt_ids=[d.id for d in active],
    )


@dataclass(slots=True)
class StrategyComparison:
    """Avalanche and snowball plans for the same debts and funding."""

    avalanche: PayoffPlan
    snowball: PayoffPlan

    @property
    def interest_saved(self) -> float:
        """Interest avalanche saves over snowball (negative if it costs more)."""
        return round_money(self.snowball.total_interest - self.avalanche.total_interest)

    @property
    def months_saved(self) -> int:
        return self.snowball.months - self.avalanche.months

    @property
    def recommended(self) -> PayoffStrategy:
        if self.interest_saved >= 0:
            return PayoffStrategy.AVALANCHE
        return PayoffStrategy.SNOWBALL


def compare_strategies(
    debts: Sequence[Debt],
    settings: StrategySettings,
    start_date: date | None = None,
) -> StrategyComparison:
    """Run the simulator once per strategy with otherwise identical settings."""

    start = start_date or date.today()
    plans = {
        strategy: generate_payoff_plan(
            debts, settings.model_copy(update={"strategy": strategy}), start
        )
        for strategy in PayoffStrategy
    }
    return StrategyComparison(
        avalanche=plans[PayoffStrategy.AVALANCHE],
        snowball=plans[PayoffStrategy.SNOWBALL],
    )

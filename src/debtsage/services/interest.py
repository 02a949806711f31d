"""Monthly interest accrual and payment splitting."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class PaymentSplit:
    """Portion of a payment that covers interest versus principal."""

    interest: float
    principal: float


def monthly_interest(balance: float, apr: float) -> float:
    """Return one month of simple interest: ``balance * (apr / 12 / 100)``."""

    return balance * (apr / 12 / 100)


def split_payment(balance: float, apr: float, payment_amount: float) -> PaymentSplit:
    """Split ``payment_amount`` into interest and principal.

    Interest reported never exceeds the payment and principal never exceeds
    the outstanding balance.
    """

    interest = monthly_interest(balance, apr)
    principal = max(0.0, payment_amount - interest)
    return PaymentSplit(
        interest=min(interest, payment_amount),
        principal=min(principal, balance),
    )


def calculate_utilization(balance: float, limit: float) -> float:
    """Return credit utilization as a percentage of ``limit``."""

    if limit <= 0:
        return 0.0
    return balance / limit * 100

"""Pytest configuration and shared fixtures for DebtSage tests.

Provides factories for debts, income sources and strategy settings plus a
float comparison helper for money assertions.
"""

from __future__ import annotations

import logging
from datetime import date

import pytest

from debtsage.models import (
    Debt,
    IncomeDeductions,
    IncomeSource,
    RecurringFunding,
    StrategySettings,
)

START = date(2026, 1, 1)


@pytest.fixture
def start_date() -> date:
    """Fixed first simulated month so projections are reproducible."""
    return START


@pytest.fixture
def debt_factory():
    """Factory for creating test debts.

    Returns:
        Callable: Function that builds Debt instances with sensible defaults
    """

    def _create_debt(
        id: str = "debt-1",
        name: str = "Test Debt",
        balance: float = 1000.00,
        apr: float = 18.0,
        minimum_payment: float = 25.00,
        category: str = "credit_card",
        original_balance: float | None = None,
        credit_limit: float | None = None,
        due_day: int = 15,
    ) -> Debt:
        return Debt(
            id=id,
            name=name,
            balance=balance,
            apr=apr,
            minimum_payment=minimum_payment,
            category=category,
            original_balance=original_balance,
            credit_limit=credit_limit,
            due_day=due_day,
        )

    return _create_debt


@pytest.fixture
def settings_factory():
    """Factory for strategy settings with a given monthly funding."""

    def _create_settings(funding: float = 0.0, strategy: str = "avalanche", one_time=None) -> StrategySettings:
        return StrategySettings(
            strategy=strategy,
            recurring_funding=RecurringFunding(amount=funding),
            one_time_fundings=one_time or [],
        )

    return _create_settings


@pytest.fixture
def income_factory():
    """Factory for income sources; deductions given as a dict of percentages."""

    def _create_income(
        id: str = "income-1",
        name: str = "Day Job",
        type: str = "salary",
        pay_frequency: str = "monthly",
        amount: float | None = None,
        hourly_rate: float | None = None,
        hours_per_week: float | None = None,
        deductions: dict | None = None,
        next_pay_date: date | None = None,
        pay_cycle_end_date: date | None = None,
    ) -> IncomeSource:
        return IncomeSource(
            id=id,
            name=name,
            type=type,
            pay_frequency=pay_frequency,
            amount=amount,
            hourly_rate=hourly_rate,
            hours_per_week=hours_per_week,
            deductions=IncomeDeductions(**deductions) if deductions is not None else None,
            next_pay_date=next_pay_date,
            pay_cycle_end_date=pay_cycle_end_date,
        )

    return _create_income


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)

    Raises:
        AssertionError: If values differ by more than tolerance
    """
    assert abs(actual - expected) <= tolerance, (
        f"Expected {expected}, got {actual} (difference: {abs(actual - expected)})"
    )


@pytest.fixture(autouse=True)
def _reset_debtsage_logger():
    """Drop handlers installed by setup_logging so streams do not leak between tests."""
    yield
    logger = logging.getLogger("debtsage")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

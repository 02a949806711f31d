"""Portfolio summary tests: totals, utilization, progress and categories."""

from __future__ import annotations

import pytest

from debtsage.models import Debt
from debtsage.models.debt import category_label
from debtsage.services.summary import calculate_debt_summary


@pytest.fixture
def portfolio(debt_factory):
    return [
        debt_factory(id="cc1", balance=500.0, original_balance=1000.0, credit_limit=1000.0, minimum_payment=25.0),
        debt_factory(id="cc2", balance=1500.0, original_balance=2000.0, credit_limit=3000.0, minimum_payment=45.0),
        debt_factory(
            id="loan",
            balance=5000.0,
            original_balance=10000.0,
            category="student_loan",
            minimum_payment=120.0,
        ),
    ]


def test_totals(portfolio):
    summary = calculate_debt_summary(portfolio)

    assert summary.total_balance == 7000.0
    assert summary.total_minimum_payments == 190.0
    assert summary.total_credit_limit == 4000.0


def test_utilization_only_counts_debts_with_limits(portfolio):
    """The student loan has no limit, so utilization is 2000 / 4000."""
    assert calculate_debt_summary(portfolio).credit_utilization == 50.0


def test_progress_against_original_balances(portfolio):
    summary = calculate_debt_summary(portfolio)

    assert summary.principal_paid == 6000.0
    assert summary.percent_paid == 46.15


def test_balances_grouped_by_category_including_custom(portfolio, debt_factory):
    portfolio.append(debt_factory(id="family", balance=750.0, category="family_loan"))

    summary = calculate_debt_summary(portfolio)

    assert summary.debts_by_category == {
        "credit_card": 2000.0,
        "student_loan": 5000.0,
        "family_loan": 750.0,
    }
    assert category_label("family_loan") == "Family Loan"
    assert category_label("credit_card") == "Credit Card"


def test_empty_portfolio_is_all_zero():
    summary = calculate_debt_summary([])

    assert summary.total_balance == 0.0
    assert summary.credit_utilization == 0.0
    assert summary.percent_paid == 0.0
    assert summary.debts_by_category == {}


def test_original_balance_defaults_to_balance(debt_factory):
    debt = debt_factory(balance=640.0)
    assert debt.original_balance == 640.0


def test_balance_above_original_is_rejected():
    with pytest.raises(ValueError):
        Debt.model_validate(
            {"id": "x", "name": "Card", "balance": 900.0, "original_balance": 500.0}
        )

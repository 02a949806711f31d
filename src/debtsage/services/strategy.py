"""Debt prioritization for the avalanche and snowball strategies."""

from __future__ import annotations

from typing import Iterable, TypeVar

from ..models.strategy import PayoffStrategy

DebtT = TypeVar("DebtT")


def sort_debts_by_strategy(debts: Iterable[DebtT], strategy: PayoffStrategy | str) -> list[DebtT]:
    """Return a new list of debts in payoff priority order.

    Avalanche orders by APR, highest first; snowball by balance, lowest
    first. The sort is stable, so ties keep their input order.
    """

    try:
        strategy = PayoffStrategy(strategy)
    except ValueError:
        raise ValueError(f"Invalid debt payoff strategy: {strategy!r}") from None

    if strategy == PayoffStrategy.AVALANCHE:
        return sorted(debts, key=lambda d: d.apr, reverse=True)
    return sorted(debts, key=lambda d: d.balance)


def priority_order(debts: Iterable[DebtT], strategy: PayoffStrategy | str) -> list[str]:
    """Return debt ids in priority order."""

    return [d.id for d in sort_debts_by_strategy(debts, strategy)]

"""DebtSage debt payoff planning package."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .services.payoff import PayoffPlan, compare_strategies, generate_payoff_plan

__all__ = [
    "BaseConfig",
    "DevConfig",
    "PayoffPlan",
    "compare_strategies",
    "generate_payoff_plan",
]

"""Model exports."""

from .debt import BUILTIN_CATEGORIES, Debt, category_label
from .income import BudgetSettings, IncomeDeductions, IncomeSource, IncomeType, PayFrequency
from .strategy import OneTimeFunding, PayoffStrategy, RecurringFunding, StrategySettings

__all__ = [
    "BUILTIN_CATEGORIES",
    "BudgetSettings",
    "Debt",
    "IncomeDeductions",
    "IncomeSource",
    "IncomeType",
    "OneTimeFunding",
    "PayFrequency",
    "PayoffStrategy",
    "RecurringFunding",
    "StrategySettings",
    "category_label",
]

"""Service module exports."""

from . import (
    amortization,
    backup,
    dates,
    export_csv,
    formatting,
    income,
    interest,
    money,
    payoff,
    progress,
    strategy,
    summary,
)

__all__ = [
    "amortization",
    "backup",
    "dates",
    "export_csv",
    "formatting",
    "income",
    "interest",
    "money",
    "payoff",
    "progress",
    "strategy",
    "summary",
]

"""Payoff strategy settings."""

from __future__ import annotations

import datetime as dt
from enum import Enum

from sqlmodel import Field, SQLModel


class PayoffStrategy(str, Enum):
    """Avalanche pays the highest APR first; snowball the lowest balance first."""

    AVALANCHE = "avalanche"
    SNOWBALL = "snowball"


class RecurringFunding(SQLModel):
    """Monthly budget available for all debt payments combined."""

    amount: float = 0.0
    day_of_month: int = Field(default=1, ge=1, le=31)
    extra_amount: float = 0.0


class OneTimeFunding(SQLModel):
    """A dated lump sum such as a tax refund or bonus."""

    id: str
    name: str = ""
    amount: float
    date: dt.date
    is_applied: bool = False


class StrategySettings(SQLModel):
    strategy: PayoffStrategy = PayoffStrategy.AVALANCHE
    recurring_funding: RecurringFunding = Field(default_factory=RecurringFunding)
    one_time_fundings: list[OneTimeFunding] = Field(default_factory=list)

"""Income and budget entities."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class IncomeType(str, Enum):
    SALARY = "salary"
    HOURLY = "hourly"


class PayFrequency(str, Enum):
    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    SEMI_MONTHLY = "semi-monthly"
    MONTHLY = "monthly"


class IncomeDeductions(SQLModel):
    """Paycheck deductions, each expressed as a percentage of gross pay."""

    federal_tax: float = 0.0
    state_tax: float = 0.0
    medicare: float = 0.0
    social_security: float = 0.0
    retirement_401k: float = 0.0
    other: float = 0.0


class IncomeSource(SQLModel):
    """A salaried or hourly income stream."""

    id: str = Field(min_length=1)
    name: str = Field(max_length=80)
    type: IncomeType = IncomeType.SALARY
    pay_frequency: PayFrequency = PayFrequency.BI_WEEKLY
    amount: Optional[float] = None  # per paycheck, salary only
    hourly_rate: Optional[float] = None
    hours_per_week: Optional[float] = None
    deductions: Optional[IncomeDeductions] = None
    next_pay_date: Optional[date] = None
    pay_cycle_end_date: Optional[date] = None


class BudgetSettings(SQLModel):
    """Income sources plus fixed monthly expenses."""

    income_sources: list[IncomeSource] = Field(default_factory=list)
    monthly_expenses: float = 0.0

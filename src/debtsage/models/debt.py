"""Debt entities."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import model_validator
from sqlmodel import Field, SQLModel


class Debt(SQLModel):
    """Interest-bearing obligation fed into payoff projections."""

    id: str = Field(min_length=1)
    name: str = Field(max_length=80)
    # Free-form tag; custom categories are allowed alongside the built-in ones.
    category: str = Field(default="other", max_length=40)
    balance: float
    original_balance: float
    apr: float = Field(default=0.0)
    minimum_payment: float = Field(default=0.0)
    due_day: int = Field(default=1, ge=1, le=31)
    credit_limit: Optional[float] = Field(default=None)
    created_at: Optional[datetime] = Field(default=None)
    updated_at: Optional[datetime] = Field(default=None)

    @model_validator(mode="before")
    @classmethod
    def _default_original_balance(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("original_balance") is None:
            data = {**data, "original_balance": data.get("balance")}
        return data

    @model_validator(mode="after")
    def _balance_within_original(self) -> "Debt":
        if self.balance > self.original_balance:
            raise ValueError(
                f"balance {self.balance} exceeds original_balance {self.original_balance}"
            )
        return self


BUILTIN_CATEGORIES: dict[str, str] = {
    "credit_card": "Credit Card",
    "student_loan": "Student Loan",
    "personal_loan": "Personal Loan",
    "auto_loan": "Auto Loan",
    "mortgage": "Mortgage",
    "medical": "Medical",
    "other": "Other",
}


def category_label(category: str) -> str:
    """Return a display label for built-in and custom category tags."""

    return BUILTIN_CATEGORIES.get(category, category.replace("_", " ").title())

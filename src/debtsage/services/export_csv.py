"""CSV export helpers for payoff plans and amortization schedules."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable

from .amortization import AmortizationRow
from .payoff import PayoffPlan

PLAN_HEADERS = [
    "month",
    "debt_id",
    "debt_name",
    "type",
    "amount",
    "principal",
    "interest",
    "remaining_balance",
]
AMORTIZATION_HEADERS = ["date", "payment", "principal", "interest", "balance"]


def _format_amount(value: float) -> str:
    return f"{value:.2f}"


def export_plan_csv(*, plan: PayoffPlan, output_path: Path) -> Path:
    """Write one row per debt per month of ``plan`` and return the path.

    Columns are deterministic: month, debt_id, debt_name, type, amount,
    principal, interest, remaining_balance.
    """

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Use newline='' for csv on Windows
    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=PLAN_HEADERS, quoting=csv.QUOTE_MINIMAL)
        writer.writeheader()
        for month in plan.monthly_breakdown:
            for row in month.payments:
                writer.writerow(
                    {
                        "month": month.month,
                        "debt_id": row.debt_id,
                        "debt_name": row.debt_name,
                        "type": row.type,
                        "amount": _format_amount(row.amount),
                        "principal": _format_amount(row.principal),
                        "interest": _format_amount(row.interest),
                        "remaining_balance": _format_amount(row.remaining_balance),
                    }
                )

    return output_path


def export_amortization_csv(*, rows: Iterable[AmortizationRow], output_path: Path) -> Path:
    """Write a single-debt amortization schedule to CSV."""

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(AMORTIZATION_HEADERS)
        for row in rows:
            writer.writerow(
                [
                    row.date,
                    _format_amount(row.payment),
                    _format_amount(row.principal),
                    _format_amount(row.interest),
                    _format_amount(row.balance),
                ]
            )

    return output_path

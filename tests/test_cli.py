"""CLI tests using click's CliRunner against backup files on disk."""

from __future__ import annotations

import csv
import json

import pytest
from click.testing import CliRunner

from debtsage.cli import main


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("DEBTSAGE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("DEBTSAGE_DEV_MODE", "false")
    monkeypatch.delenv("DEBTSAGE_DEFAULT_STRATEGY", raising=False)
    return CliRunner()


@pytest.fixture
def backup_path(tmp_path):
    document = {
        "version": "1.0.0",
        "debts": [
            {
                "id": "A",
                "name": "Card A",
                "category": "credit_card",
                "balance": 10000.0,
                "originalBalance": 12000.0,
                "apr": 30.0,
                "minimumPayment": 300.0,
                "dueDay": 5,
                "creditLimit": 20000.0,
            },
            {
                "id": "B",
                "name": "Loan B",
                "category": "personal_loan",
                "balance": 9000.0,
                "apr": 1.0,
                "minimumPayment": 100.0,
                "dueDay": 20,
            },
        ],
        "strategy": {"strategy": "avalanche", "recurringFunding": {"amount": 600.0}},
        "settings": {"currency": "USD"},
        "budget": {
            "incomeSources": [
                {"id": "job", "name": "Day job", "type": "salary", "payFrequency": "monthly", "amount": 4000.0}
            ],
            "monthlyExpenses": 3000.0,
        },
    }
    path = tmp_path / "backup.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_plan_prints_summary_and_steps(runner, backup_path):
    result = runner.invoke(main, ["plan", str(backup_path), "--start", "2026-01-01"])

    assert result.exit_code == 0, result.output
    assert "Debt-free date: 2029-" in result.output
    assert "Total interest: $" in result.output
    assert "Step 1: extra -> A" in result.output


def test_plan_strategy_override_and_csv(runner, backup_path, tmp_path):
    csv_path = tmp_path / "plan.csv"

    result = runner.invoke(
        main,
        ["plan", str(backup_path), "--strategy", "snowball", "--start", "2026-01-01", "--csv", str(csv_path)],
    )

    assert result.exit_code == 0, result.output
    assert "Step 1: extra -> B" in result.output
    assert "Monthly breakdown written" in result.output
    with csv_path.open(newline="", encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))
    assert rows[0]["month"] == "2026-01"


def test_plan_reports_underfunding(runner, backup_path):
    result = runner.invoke(main, ["plan", str(backup_path), "--funding", "50", "--start", "2026-01-01"])

    assert result.exit_code == 0, result.output
    assert "Warning: Monthly funding 50.00 is below total minimum payments 400.00" in result.output


def test_compare_recommends_avalanche(runner, backup_path):
    result = runner.invoke(main, ["compare", str(backup_path), "--start", "2026-01-01"])

    assert result.exit_code == 0, result.output
    assert "avalanche: debt-free" in result.output
    assert "snowball: debt-free" in result.output
    assert "Recommended: avalanche" in result.output


def test_summary(runner, backup_path):
    result = runner.invoke(main, ["summary", str(backup_path)])

    assert result.exit_code == 0, result.output
    assert "Total balance: $19,000.00" in result.output
    assert "Total minimum payments: $400.00" in result.output
    assert "Credit utilization: 50.0%" in result.output
    assert "personal_loan: $9,000.00" in result.output


def test_amortize(runner, backup_path, tmp_path):
    csv_path = tmp_path / "schedule.csv"

    result = runner.invoke(
        main,
        ["amortize", str(backup_path), "B", "--payment", "100", "--start", "2026-01-01", "--csv", str(csv_path)],
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[0].startswith("2026-01-01")
    assert "Schedule written" in result.output
    assert csv_path.exists()


def test_amortize_unknown_debt(runner, backup_path):
    result = runner.invoke(main, ["amortize", str(backup_path), "nope", "--payment", "100"])

    assert result.exit_code == 1
    assert "No debt with id 'nope'" in result.output


def test_income(runner, backup_path):
    result = runner.invoke(main, ["income", str(backup_path)])

    assert result.exit_code == 0, result.output
    assert "Total net monthly income: $4,000.00" in result.output
    assert "Available for debt: $1,000.00" in result.output


def test_invalid_backup_is_reported(runner, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"debts": "nope", "strategy": {}}), encoding="utf-8")

    result = runner.invoke(main, ["summary", str(path)])

    assert result.exit_code == 1
    assert "Invalid file format" in result.output


def test_malformed_settings_block_is_reported(runner, tmp_path):
    path = tmp_path / "bad-settings.json"
    path.write_text(json.dumps({"debts": [], "strategy": {}, "settings": "oops"}), encoding="utf-8")

    result = runner.invoke(main, ["summary", str(path)])

    assert result.exit_code == 1
    assert "'settings' must be an object" in result.output

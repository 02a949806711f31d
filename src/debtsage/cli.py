"""Command line interface for DebtSage."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import click

from .config import BaseConfig
from .logging_config import setup_logging
from .models.strategy import PayoffStrategy, StrategySettings
from .services.amortization import calculate_payoff_date, generate_amortization
from .services.backup import AppData, BackupFormatError, load_backup
from .services.export_csv import export_amortization_csv, export_plan_csv
from .services.formatting import format_currency, format_percent, format_time_until
from .services.income import (
    calculate_available_for_debt,
    calculate_gross_monthly_income,
    calculate_net_monthly_income,
    calculate_total_monthly_income,
)
from .services.payoff import PayoffPlan, compare_strategies, generate_payoff_plan
from .services.summary import calculate_debt_summary

_backup_argument = click.argument(
    "backup", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
_start_option = click.option(
    "--start",
    "start",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="First simulated month (YYYY-MM-DD). Defaults to today.",
)


def _load(backup: Path, config: BaseConfig) -> AppData:
    try:
        return load_backup(backup, default_strategy=config.DEFAULT_STRATEGY)
    except BackupFormatError as exc:
        raise click.ClickException(str(exc)) from exc


def _with_funding(settings: StrategySettings, funding: float | None) -> StrategySettings:
    if funding is None:
        return settings
    recurring = settings.recurring_funding.model_copy(update={"amount": funding})
    return settings.model_copy(update={"recurring_funding": recurring})


def _start_date(value: datetime | None) -> date:
    return value.date() if value else date.today()


def _echo_plan(plan: PayoffPlan, start: date, currency: str) -> None:
    remaining = format_time_until(date.fromisoformat(plan.debt_free_date), start)
    click.echo(f"Debt-free date: {plan.debt_free_date} ({remaining})")
    click.echo(f"Months: {plan.months}")
    click.echo(f"Total payments: {format_currency(plan.total_payments, currency)}")
    click.echo(f"Total interest: {format_currency(plan.total_interest, currency)}")
    for step in plan.steps:
        paid = ", ".join(m.debt_name for m in step.milestones_in_step) or "-"
        click.echo(
            f"Step {step.step_number}: extra -> {step.debt_receiving_extra or '-'} "
            f"until {step.completion_date}; paid off: {paid}"
        )
    for warning in plan.warnings:
        click.echo(f"Warning: {warning.message}", err=True)


@click.group()
@click.pass_context
def main(ctx: click.Context) -> None:
    """Project debt payoff plans from a backup file."""

    config = BaseConfig()
    setup_logging(config)
    ctx.obj = config


@main.command("plan")
@_backup_argument
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in PayoffStrategy]),
    default=None,
    help="Override the backup's strategy.",
)
@click.option("--funding", type=float, default=None, help="Override the monthly funding amount.")
@_start_option
@click.option("--with-one-time", is_flag=True, default=False, help="Apply one-time fundings.")
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False, path_type=Path), default=None)
@click.pass_obj
def plan_command(
    config: BaseConfig,
    backup: Path,
    strategy: str | None,
    funding: float | None,
    start: datetime | None,
    with_one_time: bool,
    csv_path: Path | None,
) -> None:
    """Simulate the payoff plan stored in BACKUP."""

    data = _load(backup, config)
    settings = data.strategy
    if strategy is not None:
        settings = settings.model_copy(update={"strategy": PayoffStrategy(strategy)})
    settings = _with_funding(settings, funding)

    start_date = _start_date(start)
    plan = generate_payoff_plan(
        data.debts, settings, start_date, apply_one_time_fundings=with_one_time
    )
    _echo_plan(plan, start_date, data.settings.currency or config.CURRENCY)

    if csv_path is not None:
        written = export_plan_csv(plan=plan, output_path=csv_path)
        click.echo(f"Monthly breakdown written: {written}")


@main.command("compare")
@_backup_argument
@click.option("--funding", type=float, default=None, help="Override the monthly funding amount.")
@_start_option
@click.pass_obj
def compare_command(config: BaseConfig, backup: Path, funding: float | None, start: datetime | None) -> None:
    """Compare avalanche and snowball for BACKUP."""

    data = _load(backup, config)
    settings = data.strategy
    settings = _with_funding(settings, funding)
    currency = data.settings.currency or config.CURRENCY

    comparison = compare_strategies(data.debts, settings, _start_date(start))
    for name, plan in (("avalanche", comparison.avalanche), ("snowball", comparison.snowball)):
        click.echo(
            f"{name}: debt-free {plan.debt_free_date} in {plan.months} months, "
            f"interest {format_currency(plan.total_interest, currency)}"
        )
    click.echo(f"Interest saved by avalanche: {format_currency(comparison.interest_saved, currency)}")
    click.echo(f"Recommended: {comparison.recommended.value}")


@main.command("summary")
@_backup_argument
@click.pass_obj
def summary_command(config: BaseConfig, backup: Path) -> None:
    """Show balance, minimum and utilization totals for BACKUP."""

    data = _load(backup, config)
    currency = data.settings.currency or config.CURRENCY
    summary = calculate_debt_summary(data.debts)

    click.echo(f"Total balance: {format_currency(summary.total_balance, currency)}")
    click.echo(f"Total minimum payments: {format_currency(summary.total_minimum_payments, currency)}")
    click.echo(f"Credit utilization: {format_percent(summary.credit_utilization)}")
    click.echo(f"Paid off so far: {format_percent(summary.percent_paid)}")
    for category, balance in sorted(summary.debts_by_category.items()):
        click.echo(f"  {category}: {format_currency(balance, currency)}")


@main.command("amortize")
@_backup_argument
@click.argument("debt_id")
@click.option("--payment", type=float, required=True, help="Fixed monthly payment.")
@_start_option
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False, path_type=Path), default=None)
@click.pass_obj
def amortize_command(
    config: BaseConfig,
    backup: Path,
    debt_id: str,
    payment: float,
    start: datetime | None,
    csv_path: Path | None,
) -> None:
    """Print the amortization schedule of DEBT_ID at a fixed payment."""

    data = _load(backup, config)
    debt = data.find_debt(debt_id)
    if debt is None:
        raise click.ClickException(f"No debt with id {debt_id!r} in {backup}")

    start_date = _start_date(start)
    rows = generate_amortization(debt, payment, start_date)
    for row in rows:
        click.echo(
            f"{row.date}  payment {row.payment:>10.2f}  principal {row.principal:>10.2f}  "
            f"interest {row.interest:>8.2f}  balance {row.balance:>10.2f}"
        )
    estimate = calculate_payoff_date(debt, payment, start_date)
    currency = data.settings.currency or config.CURRENCY
    click.echo(f"{len(rows)} payments, interest {format_currency(estimate.total_interest, currency)}")

    if csv_path is not None:
        written = export_amortization_csv(rows=rows, output_path=csv_path)
        click.echo(f"Schedule written: {written}")


@main.command("income")
@_backup_argument
@click.pass_obj
def income_command(config: BaseConfig, backup: Path) -> None:
    """Show monthly gross and net income for BACKUP's income sources."""

    data = _load(backup, config)
    currency = data.settings.currency or config.CURRENCY
    for source in data.budget.income_sources:
        click.echo(
            f"{source.name}: gross {format_currency(calculate_gross_monthly_income(source), currency)}, "
            f"net {format_currency(calculate_net_monthly_income(source), currency)}"
        )
    total = calculate_total_monthly_income(data.budget.income_sources)
    click.echo(f"Total net monthly income: {format_currency(total, currency)}")
    click.echo(
        f"Available for debt: {format_currency(calculate_available_for_debt(data.budget), currency)}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()

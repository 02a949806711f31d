"""Display converters for durations, percentages and currency."""

from __future__ import annotations

from datetime import date

from .dates import months_between

CURRENCY_SYMBOLS: dict[str, str] = {"USD": "$", "CAD": "CA$", "EUR": "€", "GBP": "£", "JPY": "¥"}


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_time_until(target: date, from_date: date | None = None) -> str:
    """Describe the distance to ``target`` as "X years Y months"."""

    start = from_date or date.today()
    total_months = months_between(target, start)

    if total_months < 0:
        return "Already debt-free!"
    if total_months == 0:
        return f"{(target - start).days} days"

    years, months = divmod(total_months, 12)
    if years == 0:
        return _plural(months, "month")
    if months == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')} {_plural(months, 'month')}"


def format_days_until(target: date, from_date: date | None = None) -> str:
    days = (target - (from_date or date.today())).days
    if days < 0:
        return "Past"
    if days == 0:
        return "Today"
    if days == 1:
        return "1 day"
    return f"{days} days"


def _symbol(currency: str) -> str:
    code = currency.upper()
    return CURRENCY_SYMBOLS.get(code, f"{code} ")


def format_currency(amount: float, currency: str = "USD") -> str:
    """Format ``amount`` like ``$1,234.56`` (negative as ``-$1,234.56``)."""

    sign = "-" if amount < 0 else ""
    return f"{sign}{_symbol(currency)}{abs(amount):,.2f}"


def format_compact_currency(amount: float, currency: str = "USD") -> str:
    """Shorten large amounts: ``$1.2M`` from 100k up, whole dollars from 10k up."""

    if amount >= 100_000:
        for threshold, suffix in ((1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K")):
            scaled = round(amount / threshold, 1)
            if scaled >= 1:
                text = f"{scaled:.1f}".removesuffix(".0")
                return f"{_symbol(currency)}{text}{suffix}"
    if amount >= 10_000:
        return f"{_symbol(currency)}{amount:,.0f}"
    return format_currency(amount, currency)


def format_percent(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def format_ordinal(day: int) -> str:
    """Return ``day`` with its English ordinal suffix (1st, 2nd, 11th, 23rd)."""

    if 11 <= day % 100 <= 13:
        return f"{day}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"

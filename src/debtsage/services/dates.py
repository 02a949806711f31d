"""Month arithmetic, due dates and payday calendars."""

from __future__ import annotations

from calendar import monthrange
from datetime import date, timedelta

from ..models.income import IncomeSource, PayFrequency

# Guards the weekly/bi-weekly walk; a month holds at most five paydays.
_MAX_PAYDAY_STEPS = 10


def _clamped(year: int, month: int, day: int) -> date:
    return date(year, month, min(day, monthrange(year, month)[1]))


def add_months(value: date, months: int) -> date:
    """Shift ``value`` by whole months, clamping to the last day when needed."""

    index = value.year * 12 + (value.month - 1) + months
    year, month_index = divmod(index, 12)
    return _clamped(year, month_index + 1, value.day)


def month_key(value: date) -> str:
    """Return the ``YYYY-MM`` key for ``value``."""

    return f"{value.year:04d}-{value.month:02d}"


def months_between(later: date, earlier: date) -> int:
    """Return the number of whole calendar months from ``earlier`` to ``later``."""

    months = (later.year - earlier.year) * 12 + (later.month - earlier.month)
    if months > 0 and later.day < earlier.day:
        months -= 1
    elif months < 0 and later.day > earlier.day:
        months += 1
    return months


def next_due_date(due_day: int, from_date: date | None = None) -> date:
    """Return the next date a bill due on ``due_day`` falls on.

    Short months clamp the due day to their last day. A due date equal to
    ``from_date`` counts as upcoming.
    """

    today = from_date or date.today()
    candidate = _clamped(today.year, today.month, due_day)
    if candidate >= today:
        return candidate
    following = add_months(today.replace(day=1), 1)
    return _clamped(following.year, following.month, due_day)


def _recurring_days_in_month(anchor: date, frequency: PayFrequency, month: date) -> list[date]:
    month_start = month.replace(day=1)
    month_end = _clamped(month.year, month.month, 31)

    if frequency == PayFrequency.SEMI_MONTHLY:
        # An anchor in the first half pairs with a day two weeks later,
        # otherwise with a day two weeks earlier.
        if anchor.day <= 15:
            first_day, second_day = anchor.day, min(anchor.day + 14, 28)
        else:
            first_day, second_day = max(anchor.day - 14, 1), anchor.day
        return [
            _clamped(month.year, month.month, first_day),
            _clamped(month.year, month.month, second_day),
        ]

    if frequency == PayFrequency.MONTHLY:
        return [_clamped(month.year, month.month, anchor.day)]

    interval = timedelta(days=7 if frequency == PayFrequency.WEEKLY else 14)
    current = anchor
    while current > month_start:
        current -= interval
    # Anchors far in the past jump straight to the cycle just before the month.
    current += interval * ((month_start - current).days // interval.days)

    days: list[date] = []
    steps = 0
    while current <= month_end and steps < _MAX_PAYDAY_STEPS:
        if month_start <= current <= month_end:
            days.append(current)
        current += interval
        steps += 1
    return days


def paydays_in_month(source: IncomeSource, month: date) -> list[date]:
    """Return every payday of ``source`` inside the month containing ``month``."""

    if source.next_pay_date is None:
        return []
    return _recurring_days_in_month(source.next_pay_date, source.pay_frequency, month)


def pay_cycle_ends_in_month(source: IncomeSource, month: date) -> list[date]:
    """Return every pay-cycle end date of ``source`` inside the month."""

    if source.pay_cycle_end_date is None:
        return []
    return _recurring_days_in_month(source.pay_cycle_end_date, source.pay_frequency, month)
